"""Route modules for the Tubeflow API."""
