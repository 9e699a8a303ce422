"""url-toolkit command-line package."""
