class LinkedInError(Exception):
    """LinkedIn authorization or profile import failed."""
