"""Feature modules of the Domca data layer."""
