"""Interactive command-line Pokedex backed by the PokeAPI, with an expiring response cache."""

__version__ = "0.1.0"
__all__ = ["cache", "client", "commands", "models", "repl"]