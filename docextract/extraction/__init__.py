from docextract.extraction.extraction_client import ExtractionClient
from docextract.extraction.factory import ExtractionClientFactory
from docextract.extraction.response_parser import ResponseParser

__all__ = ["ExtractionClient", "ExtractionClientFactory", "ResponseParser"]
