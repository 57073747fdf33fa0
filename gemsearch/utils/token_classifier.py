"""
Classifies tokenizer events from a RubyGems search page.

Classification is purely attribute based: a start tag either opens a new gem
record, arms one of the field states, or does neither. No depth tracking is
done, so markup drift is tolerated but out-of-order field markers will
silently attach text to the wrong field.
"""
import enum

GEM_CLASS = "gems__gem"
NAME_CLASS = "gems__gem__name"
VERSION_CLASS = "gems__gem__version"
DESCRIPTION_CLASS = "gems__gem__desc"


class FieldState(enum.Enum):
    IDLE = "idle"
    EXPECT_NAME = "name"
    EXPECT_VERSION = "version"
    EXPECT_DESCRIPTION = "description"


FIELD_MARKERS = {
    NAME_CLASS: FieldState.EXPECT_NAME,
    VERSION_CLASS: FieldState.EXPECT_VERSION,
    DESCRIPTION_CLASS: FieldState.EXPECT_DESCRIPTION,
}


def has_class(attrs, class_name):
    # the whole attribute value must match, "gems__gem__desc t-text" is not a marker
    return any(key == "class" and value == class_name for key, value in attrs)


def get_href(attrs):
    href = ""
    for key, value in attrs:
        if key == "href":
            href = value or ""
    return href


def is_gem(attrs):
    return has_class(attrs, GEM_CLASS)


def is_gem_anchor(tag, attrs):
    return tag == "a" and is_gem(attrs)


def field_state_for(attrs):
    for class_name, state in FIELD_MARKERS.items():
        if has_class(attrs, class_name):
            return state
    return FieldState.IDLE


class TokenClassifier:
    """
    One-shot field state machine driving a RecordAccumulator.

    Every start tag re-evaluates the state, so an armed field that is not
    followed by text before the next start tag is dropped. A text event in
    an armed state is assigned (stripped) to the current record and the
    machine returns to IDLE.
    """

    def __init__(self, accumulator, root_url):
        self.accumulator = accumulator
        self.root_url = root_url
        self.state = FieldState.IDLE

    def start_tag(self, tag, attrs):
        if is_gem(attrs):
            self.accumulator.begin_record()

        if is_gem_anchor(tag, attrs):
            self.accumulator.set_field("url", self.root_url + get_href(attrs))

        self.state = field_state_for(attrs)

    def text(self, data):
        if self.state is FieldState.IDLE:
            return
        self.accumulator.set_field(self.state.value, data.strip())
        self.state = FieldState.IDLE
