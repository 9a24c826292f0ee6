"""LRU cache with optional TTL and pluggable eviction policies."""