from .gem import Gem
from .token_classifier import FieldState, TokenClassifier
from .record_accumulator import RecordAccumulator
from .search_parser import GemSearchParser, extract_gems
from .fetcher import build_search_url, search_gems
from .output import render_results, sort_gems
