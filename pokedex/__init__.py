"""An interactive command-line Pokedex backed by the PokeAPI, with a cached API client."""

__version__ = "0.1.0"
__all__ = ["__version__"]