"""Application layer – dismissible flags use-case, ports and in-memory adapter."""
