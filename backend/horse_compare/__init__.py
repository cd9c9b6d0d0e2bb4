"""Horse Compare: compare horses by resampled mean race speed."""
