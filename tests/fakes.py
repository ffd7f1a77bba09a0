"""In-memory doubles for the lexical database and the relatedness measure."""

from senserelate.wsd.base import LexicalDatabase, RelatednessMeasure, Sense, WordForm

POS_ORDER = ("n", "v", "a", "r")


class FakeDatabase(LexicalDatabase):
    """Dictionary-backed lexical database.

    Args:
        lexicon: {base word: {pos: number of senses}}
        morphology: {inflected word: [base words]}
        frequencies: {"word#pos#index": count}
        derivations: {"word#pos": ["word#pos#index", ...]}
    """

    def __init__(self, lexicon, morphology=None, frequencies=None, derivations=None):
        self.lexicon = lexicon
        self.morphology = morphology or {}
        self.frequencies = frequencies or {}
        self.derivations = derivations or {}
        self.valid_forms_calls = []

    def valid_forms(self, word, pos=None):
        self.valid_forms_calls.append((word, pos))
        word = word.lower()
        bases = self.morphology.get(word, [word])
        forms = []
        for p in (pos,) if pos else POS_ORDER:
            for base in bases:
                if p in self.lexicon.get(base, {}):
                    forms.append(WordForm(base, p))
        return forms

    def query_senses(self, form):
        count = self.lexicon.get(form.word, {}).get(form.pos, 0)
        return [Sense(form.word, form.pos, i) for i in range(1, count + 1)]

    def frequency(self, sense):
        return self.frequencies.get(str(sense), 0)

    def query_derivational(self, form):
        return [Sense.parse(s) for s in self.derivations.get(str(form), [])]


class FakeMeasure(RelatednessMeasure):
    """Symmetric lookup-table measure.

    Pairs missing from ``scores`` score ``default``; pairs listed in
    ``failures`` cannot be scored.
    """

    def __init__(self, scores=None, default=0.0, failures=()):
        super().__init__()
        self.scores = {frozenset(pair): value for pair, value in (scores or {}).items()}
        self.default = default
        self.failures = {frozenset(pair) for pair in failures}
        self.calls = []

    @property
    def name(self):
        return "fake"

    def relatedness(self, sense_a, sense_b):
        key = frozenset((str(sense_a), str(sense_b)))
        self.calls.append((str(sense_a), str(sense_b)))
        if key in self.failures:
            self.error = f"fake: cannot score {sense_a} and {sense_b}"
            self._trace_string = f"fake({sense_a}, {sense_b}) failed" if self.trace else ""
            return None
        score = self.scores.get(key, self.default)
        self._trace_string = f"fake({sense_a}, {sense_b}) = {score:g}" if self.trace else ""
        return score


def scenario_database():
    """Lexicon for the sentence "my cat is a wise cat"."""
    return FakeDatabase(
        lexicon={
            "cat": {"n": 8, "v": 2},
            "be": {"v": 13},
            "a": {"n": 7},
            "wise": {"a": 5, "n": 1},
        },
        morphology={"is": ["be"]},
    )


def scenario_measure():
    """Scores that make cat#n#4, be#v#3, a#n#2 and wise#a#4 win."""
    return FakeMeasure(
        {
            ("cat#n#4", "be#v#3"): 3.0,
            ("cat#n#4", "a#n#2"): 2.0,
            ("cat#n#4", "wise#a#4"): 5.0,
            # below the pairwise threshold of 1 used by the scenario
            ("cat#n#1", "be#v#1"): 0.5,
        }
    )


SCENARIO_TOKENS = ["my/PRP$", "cat/NN", "is/VBZ", "a/DT", "wise/JJ", "cat/NN"]
SCENARIO_EXPECTED = ["my", "cat#n#4", "be#v#3", "a#n#2", "wise#a#4", "cat#n#4"]
