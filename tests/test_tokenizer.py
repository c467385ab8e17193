from tfidf_rag.tokenizer import Tokenizer


def test_punctuation_and_case():
    assert Tokenizer().tokenize("Hello, World!!") == ["hello", "world"]


def test_short_tokens_dropped():
    assert Tokenizer().tokenize("a an the cat") == ["the", "cat"]


def test_empty_and_whitespace():
    tok = Tokenizer()
    assert tok.tokenize("") == []
    assert tok.tokenize("   \n\t ") == []


def test_underscore_and_digits_kept():
    assert Tokenizer().tokenize("snake_case v2.0 http2") == ["snake_case", "http2"]


def test_repetition_preserved():
    assert Tokenizer().tokenize("dog dog DOG cat") == ["dog", "dog", "dog", "cat"]


def test_deterministic():
    tok = Tokenizer()
    text = "Refunds: processed quickly (usually)!"
    assert tok.tokenize(text) == tok.tokenize(text)


def test_custom_min_length():
    assert Tokenizer(min_token_len=1).tokenize("a b cd") == ["a", "b", "cd"]
