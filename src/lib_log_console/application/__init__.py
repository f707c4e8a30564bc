"""Application-layer contracts for the console logger."""
