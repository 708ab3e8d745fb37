class GuidanceError(Exception):
    """
    Raised for unknown signs, spreads or other invalid guidance requests.
    """
