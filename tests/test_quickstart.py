"""Test that the quickstart API works for termlint."""
from __future__ import annotations


def test_quickstart_imports() -> None:
    import termlint

    assert callable(termlint.loads_model)
    assert callable(termlint.validate)


def test_quickstart_version(expected_version: str) -> None:
    import termlint

    assert termlint.__version__ == expected_version


def test_quickstart_validate_string_model() -> None:
    import termlint

    model = termlint.loads_model(
        '{"smithy": "2.0", "shapes": {"example.db#MasterRecord": {"type": "structure"}}}'
    )
    issues = termlint.validate(model)
    assert [d.message for d in issues] == [
        "Structure shape uses a non-inclusive term 'Master'. Consider using one of the "
        "following terms instead: 'Primary', 'Parent' and 'Main'."
    ]


def test_quickstart_validate_with_config() -> None:
    import termlint

    model = termlint.loads_model(
        '{"shapes": {"example.db#SanityCheck": {"type": "operation"}}}'
    )
    config = termlint.TermsConfig.from_dict(
        {"appendNoninclusiveTerms": {"sanity check": ["confidence check"]}}
    )
    assert termlint.validate(model) == []
    assert termlint.validate(model, config) == []
    config = termlint.TermsConfig.from_dict(
        {"appendNoninclusiveTerms": {"sanity": ["confidence"]}}
    )
    issues = termlint.validate(model, config)
    assert len(issues) == 1
    assert "'Confidence'" in issues[0].message


def test_quickstart_load_model_file(weather_model_file) -> None:
    import termlint

    model = termlint.load_model(weather_model_file)
    assert isinstance(termlint.validate(model), list)
