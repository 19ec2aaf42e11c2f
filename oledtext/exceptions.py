class OledTextException(Exception):
    pass


class ConfigurationError(OledTextException):
    pass


# Display exceptions below are raised by the rendering layer only.
class DisplayException(OledTextException):
    pass


class DisplayNotReady(DisplayException):
    pass
