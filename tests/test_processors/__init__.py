"""
Unit tests for the processors module.

Test modules:
    - test_file_loader: Type detection and size limits
    - test_renamer: Renaming on disk and the per-file workflow
"""
