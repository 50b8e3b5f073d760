"""Dictionary-based decompounding of German compound words."""

from .analysis import Analyzer, build_decompounder, tokenize
from .config import Config, ConfigurationError
from .connectors import ConnectorRules
from .emitter import Emitter
from .filter import DecompoundFilter, Decompounder, KeywordGate
from .lexicon import Lexicon
from .models import EmittedToken, Segmentation, Token
from .normalizer import SuffixNormalizer
from .segmenter import DictionarySegmenter

__all__ = [
    "Analyzer",
    "Config",
    "ConfigurationError",
    "ConnectorRules",
    "DecompoundFilter",
    "Decompounder",
    "DictionarySegmenter",
    "Emitter",
    "EmittedToken",
    "KeywordGate",
    "Lexicon",
    "Segmentation",
    "SuffixNormalizer",
    "Token",
    "build_decompounder",
    "tokenize",
]
