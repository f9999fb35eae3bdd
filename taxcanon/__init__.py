"""Turn NCBI taxonomy dumps into a taxonomy table with seven canonical ranks."""

__version__ = "0.3.0"

from taxcanon.core.pipeline import build
from taxcanon.io.writers import write

__all__ = ['build', 'write', '__version__']
