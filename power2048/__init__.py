"""Power 2048: the 2048 sliding-tile game generalized to merge bases 2 to 5."""
