from assertdocs.services.readme.merger import merge_negatives, positive_name
from assertdocs.services.readme.models import MethodDoc, MethodRecord


def _records(*names):
    return {n: MethodRecord(n, MethodDoc(f"{n} doc.")) for n in names}


def test_positive_name_rules():
    assert positive_name("assertFooNot") == "assertFoo"
    assert positive_name("assertNotEmpty") == "assertEmpty"
    assert positive_name("assertNotNotSame") == "assertNotSame"
    assert positive_name("assertFoo") is None
    assert positive_name("checkNotFoo") is None


def test_negative_becomes_inverse_of_positive():
    merged = merge_negatives(_records("assertFooNot", "assertFoo", "assertBar"))
    assert list(merged) == ["assertBar", "assertFoo"]
    assert merged["assertFoo"].inverse.name == "assertFooNot"
    assert merged["assertBar"].inverse is None


def test_negative_without_positive_stays_top_level():
    merged = merge_negatives(_records("assertFooNot"))
    assert list(merged) == ["assertFooNot"]
    assert merged["assertFooNot"].inverse is None


def test_merge_does_not_touch_input():
    methods = _records("assertFoo", "assertFooNot")
    merge_negatives(methods)
    assert set(methods) == {"assertFoo", "assertFooNot"}
    assert methods["assertFoo"].inverse is None


def test_not_inside_a_word_still_counts():
    assert positive_name("assertNotebookSaved") == "assertebookSaved"
    assert positive_name("assertAnnotation") is None
