class ConfigurationError(RuntimeError):
    """Raised at startup when static configuration cannot be used."""


class LocaleConfigurationError(ConfigurationError):
    pass


class RouteConfigurationError(ConfigurationError):
    pass
