"""GetResponse authentication backends module."""
