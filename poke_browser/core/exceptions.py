

class PokeBrowserError(Exception):
    """Base exception for all poke_browser errors"""
    pass

class ConfigError(PokeBrowserError):
    """Invalid or inconsistent global.json"""
    pass

class DatasetSchemaError(PokeBrowserError):
    """
    CSV header doesn't match what the loader expects
    missing Name/Type/stat columns, etc
    """
    pass

class RecordParseError(PokeBrowserError):
    """A single row could not be turned into a Record (no name, bad generation)"""
    pass
