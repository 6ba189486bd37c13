"""Generate TypeScript RPC handler classes from YAML handler descriptors."""
