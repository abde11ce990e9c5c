class EventCardError(Exception):
    pass


class AssetLoadError(EventCardError):
    pass


class TranslationNotFoundError(EventCardError):
    pass


class UnsupportedLocaleError(EventCardError):
    pass


class InvalidEventError(EventCardError):
    pass
