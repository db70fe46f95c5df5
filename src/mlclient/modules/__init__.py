"""Feature modules - schemas and actions per entity."""
