"""A minimal in-memory store of named tables, rows and schemas."""