class RecipeFinderError(Exception):
    pass


class ConfigError(RecipeFinderError):
    pass


class MissingFileError(RecipeFinderError):
    pass


class ValidationError(RecipeFinderError):
    pass


class CatalogError(ValidationError):
    pass
