import codecs
from html.parser import HTMLParser

from ..config import RUBYGEMS_ROOT
from .record_accumulator import RecordAccumulator
from .token_classifier import TokenClassifier


class GemSearchParser(HTMLParser):
    """
    Streams a search page into a RecordAccumulator.

    HTMLParser may split one text node into several handle_data calls when
    the page arrives in chunks, so text is buffered and handed to the
    classifier as a single event once the next markup token shows up.
    """

    def __init__(self, root_url=RUBYGEMS_ROOT, finalize_trailing=False):
        super().__init__()
        self.accumulator = RecordAccumulator(finalize_trailing=finalize_trailing)
        self.classifier = TokenClassifier(self.accumulator, root_url)
        self._pending_text = []

    def _flush_text(self):
        if self._pending_text:
            text = "".join(self._pending_text)
            self._pending_text = []
            self.classifier.text(text)

    def handle_starttag(self, tag, attrs):
        self._flush_text()
        self.classifier.start_tag(tag, attrs)

    def handle_startendtag(self, tag, attrs):
        # <tag/> is a self-closing token, not a start tag
        self._flush_text()

    def handle_endtag(self, tag):
        self._flush_text()

    def handle_comment(self, data):
        self._flush_text()

    def handle_decl(self, decl):
        self._flush_text()

    def handle_pi(self, data):
        self._flush_text()

    def unknown_decl(self, data):
        self._flush_text()

    def handle_data(self, data):
        self._pending_text.append(data)

    def close(self):
        super().close()
        self._flush_text()

    def results(self):
        return self.accumulator.finish()


def extract_gems(chunks, root_url=RUBYGEMS_ROOT, finalize_trailing=False, encoding="utf-8"):
    """
    Feed an iterable of bytes or str chunks through the tokenizer and return
    the finalized gems keyed by name.
    """
    parser = GemSearchParser(root_url=root_url, finalize_trailing=finalize_trailing)
    decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
    for chunk in chunks:
        if not chunk:
            continue
        if isinstance(chunk, bytes):
            chunk = decoder.decode(chunk)
        parser.feed(chunk)
    parser.feed(decoder.decode(b"", final=True))
    parser.close()
    return parser.results()
