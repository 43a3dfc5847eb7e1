import pytest
from growthkit.domain.exceptions import InvalidInputError
from growthkit.domain.services import HeadlineGenerator
from growthkit.domain.services.headline_generator import TONES


class TestHeadlineGenerator:
    def test_bold_templates(self):
        headlines = HeadlineGenerator().generate("SEO", "Bold")
        assert headlines == [
            "Why Your SEO Strategy is Failing (and How to Fix It)",
            "The One Thing You're Getting Wrong About SEO",
            "Stop Wasting Time on SEO and Do This Instead",
        ]

    @pytest.mark.parametrize("tone", TONES)
    def test_every_tone_yields_three(self, tone):
        headlines = HeadlineGenerator().generate("Email Marketing", tone)
        assert len(headlines) == 3
        assert all("Email Marketing" in h for h in headlines)

    def test_unknown_tone_falls_back_to_professional(self):
        generator = HeadlineGenerator()
        assert generator.generate("SEO", "Sarcastic") == generator.generate(
            "SEO", "Professional"
        )

    def test_topic_is_kept_verbatim(self):
        headlines = HeadlineGenerator().generate("  Growth  ", "Casual")
        assert headlines[2] == "Let's Talk About   Growth  "

    def test_braces_in_topic_are_literal(self):
        headlines = HeadlineGenerator().generate("{tone}", "Witty")
        assert headlines[1] == "The {tone} Guide for People Who Hate Guides"

    @pytest.mark.parametrize("topic, tone", [("", "Bold"), ("SEO", ""), ("   ", "Bold"), (None, "Bold")])
    def test_requires_topic_and_tone(self, topic, tone):
        with pytest.raises(InvalidInputError, match="Topic and tone are required."):
            HeadlineGenerator().generate(topic, tone)
