"""CMS modules."""
