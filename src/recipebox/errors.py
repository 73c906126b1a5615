class RecipeboxError(Exception):
    pass


class ConfigError(RecipeboxError):
    pass


class ValidationError(RecipeboxError):
    pass


class OutOfRangeError(RecipeboxError, IndexError):
    pass


class UnknownRecipeError(RecipeboxError, KeyError):
    pass


class ExportWriteError(RecipeboxError):
    pass


class ShareUnavailableError(RecipeboxError):
    pass


class SharePlatformError(RecipeboxError):
    pass
