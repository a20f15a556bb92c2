import pytest
from pydantic import ValidationError

from brand_analysis.core.errors import MissingCredentialError
from brand_analysis.core.utils import SequenceRandomSource, SystemRandomSource
from brand_analysis.reports.generator import ReportGenerator

SUB_SCORES = ("Bedrock", "Story", "Compass", "Current", "Lightning")


def test_generate_nimbus_report() -> None:
    generator = ReportGenerator(random_source=SequenceRandomSource([2, 3, 1, 4]))
    payload = generator.generate("Nimbus.io", "k1").to_payload()

    analysis = payload["spark"]["analysis"]
    assert analysis["Bedrock"] == {
        "score": 8,
        "rationale": "A strong linguistic foundation. Its brevity is a major asset.",
    }
    assert [analysis[key]["score"] for key in SUB_SCORES] == [8, 7, 8, 7, 9]
    assert payload["spark"]["totalScore"] == 39
    assert payload["spark"]["finalGrade"] == "A- (Prime Asset)"
    assert payload["spark"]["locus"] == {"grade": "A", "rationale": "The .io TLD is a solid, modern choice."}
    assert payload["echo"] == {
        "grade": "B",
        "analysis": (
            "The chamber finds a strong positive resonance around 'nimbus'. Its primal feel is direct, "
            "it evokes a clear founder vision, and its narrative potential is significant."
        ),
    }
    assert payload["shadow"] == {
        "score": "Low",
        "analysis": (
            "The Conceptual Shadow is minimal. Any primary risk lies in the Associative Shadow of the .io TLD."
        ),
    }
    assert payload["spark"]["cartography"]["summary"] == (
        "Initial checks suggest social handles for 'nimbus' are likely taken, requiring creative modifiers."
    )


def test_generate_payload_shape() -> None:
    payload = ReportGenerator(random_source=SystemRandomSource(1)).generate("example.com", "k").to_payload()

    assert set(payload) == {"echo", "spark", "shadow", "ignition"}
    assert set(payload["spark"]) == {
        "sieve",
        "analysis",
        "locus",
        "cartography",
        "totalScore",
        "finalGrade",
        "alistairNote",
    }
    assert list(payload["spark"]["analysis"]) == list(SUB_SCORES)
    assert payload["spark"]["sieve"] == {
        "recommendation": "Curate",
        "rationale": "The asset has clear commercial potential.",
    }
    assert payload["spark"]["alistairNote"] == {
        "profile": "The Keystone",
        "insight": "A versatile, all-around strong asset with a good story and solid commercial potential.",
    }
    assert payload["ignition"] == {
        "myth": (
            "To build the definitive platform for creative collaboration, "
            "making complex systems accessible and human-centric."
        ),
        "archetype": "The Systems Thinker: A founder who sees the big picture.",
        "moat": "The name's primary moat is its clarity and authority.",
        "moves": [
            "Publish a founding manifesto.",
            "Secure key social media handles.",
            "Begin building a community.",
        ],
    }


def test_long_name_rationale() -> None:
    generator = ReportGenerator(random_source=SequenceRandomSource([0, 0, 0, 0]))
    report = generator.generate("abcdefghij.biz", "k")
    assert report.spark.analysis.bedrock.score == 6
    assert "length is a minor liability" in report.spark.analysis.bedrock.rationale
    assert report.spark.locus.grade == "B"
    assert report.spark.total_score == 6 + 5 + 5 + 6 + 5
    assert report.spark.final_grade == "Curation Pass"


def test_total_score_matches_sub_scores_across_many_draws() -> None:
    generator = ReportGenerator(random_source=SystemRandomSource(42))
    for _ in range(300):
        spark = generator.generate("brandable.xyz", "k").spark
        analysis = spark.analysis
        assert spark.total_score == sum(analysis.scores())
        assert 24 <= spark.total_score <= 45
        assert 5 <= analysis.story.score <= 9
        assert 5 <= analysis.compass.score <= 9
        assert 6 <= analysis.current.score <= 9
        assert 5 <= analysis.lightning.score <= 9
        assert spark.locus.grade == "C"


def test_highest_draws_reach_top_grade() -> None:
    # 短名稱 Bedrock 為 10，總分上限為 46
    generator = ReportGenerator(random_source=SequenceRandomSource([4, 4, 3, 4]))
    spark = generator.generate("ai.ai", "k").spark
    assert spark.total_score == 46
    assert spark.final_grade == "A+ (Foundational Landmark)"


def test_non_random_fields_are_stable_between_calls() -> None:
    generator = ReportGenerator()
    first = generator.generate("Nimbus.io", "k1")
    second = generator.generate("Nimbus.io", "k1")
    assert first.echo == second.echo
    assert first.shadow == second.shadow
    assert first.ignition == second.ignition
    assert first.spark.locus == second.spark.locus
    assert first.spark.analysis.bedrock == second.spark.analysis.bedrock


def test_name_without_dot_uses_empty_tld() -> None:
    report = ReportGenerator(random_source=SystemRandomSource(3)).generate("noTldHere", "k")
    assert report.spark.locus.grade == "B"
    assert report.spark.locus.rationale == "The . TLD is a solid, modern choice."
    assert "'notldhere'" in report.echo.analysis


def test_multi_label_name_keeps_second_label_as_tld() -> None:
    report = ReportGenerator(random_source=SystemRandomSource(3)).generate("my.brand.io", "k")
    assert report.spark.locus.grade == "B"
    assert ".brand TLD" in report.shadow.analysis


@pytest.mark.parametrize("credential", [None, ""])
def test_missing_credential_is_rejected(credential) -> None:
    source = SequenceRandomSource([])
    with pytest.raises(MissingCredentialError) as excinfo:
        ReportGenerator(random_source=source).generate("foo.com", credential)
    assert excinfo.value.message == "API key is missing."
    assert excinfo.value.status_code == 400


def test_report_is_immutable() -> None:
    report = ReportGenerator(random_source=SystemRandomSource(5)).generate("foo.com", "k")
    with pytest.raises(ValidationError):
        report.spark.total_score = 1


@pytest.mark.parametrize(
    ("asset_name", "detail"),
    [
        ("sevenly.io", "brevity is a major asset"),
        ("eightish.io", "length is a minor liability"),
        ("😀😀😀.io", "brevity is a major asset"),
        ("😀😀😀😀.io", "length is a minor liability"),
    ],
)
def test_bedrock_rationale_threshold(asset_name: str, detail: str) -> None:
    report = ReportGenerator(random_source=SystemRandomSource(2)).generate(asset_name, "k")
    assert report.spark.analysis.bedrock.rationale == f"A strong linguistic foundation. Its {detail}."


def test_ignition_moves_cannot_be_mutated() -> None:
    report = ReportGenerator(random_source=SystemRandomSource(5)).generate("foo.com", "k")
    assert isinstance(report.ignition.moves, tuple)
    with pytest.raises(AttributeError):
        report.ignition.moves.append("Rebrand.")
    assert len(ReportGenerator().generate("foo.com", "k").ignition.moves) == 3
