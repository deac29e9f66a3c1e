"""I/O adapters: console logging, GitHub API, keyring and argv."""
