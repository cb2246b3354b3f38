from ticketsim.infra.features import build_features
from ticketsim.normalize import normalize_text
from ticketsim.tokens import count_tokens, tokenize


def test_build_features_keeps_fields_separate():
    features = build_features("VPN VPN VPN", "Cannot connect to VPN")
    assert features.subject_tokens == {"vpn"}
    assert features.description_tokens == {"cannot", "connect", "vpn"}
    assert features.subject_counts == {"vpn": 3}
    assert features.description_counts == {"cannot": 1, "connect": 1, "vpn": 1}


def test_build_features_treats_missing_description_as_empty():
    features = build_features("Printer jams", None)
    assert features.subject_tokens == {"printer", "jams"}
    assert features.description_tokens == frozenset()
    assert features.description_counts == {}
    assert not features.is_empty


def test_build_features_empty_when_only_stopwords():
    features = build_features("the and or", "a is it")
    assert features.is_empty


def test_build_features_honours_min_token_length():
    features = build_features("vpn down", "go now", min_token_length=4)
    assert features.subject_tokens == {"down"}
    assert features.description_tokens == frozenset()


def test_build_features_agrees_with_token_helpers():
    text = "Printer printer jams, jams again!"
    normalized = normalize_text(text)
    features = build_features(text, text)
    assert features.subject_tokens == tokenize(normalized)
    assert features.subject_counts == count_tokens(normalized)
    assert features.subject_counts == {"printer": 2, "jams": 2, "again": 1}
