import pytest

from securechat.services.toxicity import DEFAULT_KEYWORDS, ToxicityClassifier


@pytest.fixture
def classifier():
    return ToxicityClassifier()


@pytest.mark.parametrize("text", [
    "I hate this",
    "I want to kill you",
    "That's stupid",
    "You are an idiot",
    "Stop the abuse",
])
def test_each_keyword_is_flagged(classifier, text):
    assert classifier.is_toxic(text)


@pytest.mark.parametrize("text", ["HATE", "Hate", "hAtE", "KILL", "Kill"])
def test_matching_ignores_case(classifier, text):
    assert classifier.is_toxic(text)


def test_keyword_position_does_not_matter(classifier):
    assert classifier.is_toxic("Stupid person")
    assert classifier.is_toxic("This is really stupid behavior")
    assert classifier.is_toxic("You are so stupid")
    assert classifier.is_toxic("You idiot!")
    assert classifier.is_toxic("I hate stupid people")


def test_substring_inside_longer_words_matches(classifier):
    assert classifier.is_toxic("hateful")
    assert classifier.is_toxic("I hated it")
    assert classifier.is_toxic("such stupidity")
    # w-hate-ver: substring matching, not word matching
    assert classifier.is_toxic("whatever")


@pytest.mark.parametrize("text", [
    "Hello, how are you?",
    "Good morning! How's your day?",
    "Thanks for your help!",
    "I love this project",
    "We have a plan",
    "Help is available",
    "She is smart",
])
def test_clean_text_is_not_flagged(classifier, text):
    assert not classifier.is_toxic(text)


def test_absent_or_empty_content_is_clean(classifier):
    assert classifier.is_toxic(None) is False
    assert classifier.is_toxic("") is False


def test_result_is_repeatable(classifier):
    assert [classifier.is_toxic("I hate Mondays") for _ in range(3)] == [True, True, True]


def test_custom_keywords_replace_defaults():
    c = ToxicityClassifier(["Spam", "", "  "])
    assert c.keywords == ("spam",)
    assert c.is_toxic("buy SPAM now")
    assert not c.is_toxic("I hate this")


def test_default_keywords():
    assert ToxicityClassifier().keywords == DEFAULT_KEYWORDS
