"""Infrastructure modules for the language negotiation service.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Interface language negotiation and activation
- services: Dependency injection services (SettingsDep, LanguageServiceDep)
"""
