from .data_sink import SentimentSink
from .document_sink import DocumentStoreSink
from .factory import open_sink
from .http_sink import HttpBackendSink

__all__ = ["SentimentSink", "DocumentStoreSink", "HttpBackendSink", "open_sink"]
