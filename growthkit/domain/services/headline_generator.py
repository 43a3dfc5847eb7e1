"""Headline Generator - tone-specific templates filled with a topic."""

from growthkit.domain.exceptions import InvalidInputError

DEFAULT_TONE = "Professional"

TEMPLATES: dict[str, tuple[str, ...]] = {
    "Professional": (
        "The Ultimate Guide to {topic}",
        "How to Master {topic} in 5 Simple Steps",
        "A Data-Driven Approach to {topic}",
    ),
    "Casual": (
        "Everything You Need to Know About {topic}",
        "{topic} Made Easy: A Beginner's Guide",
        "Let's Talk About {topic}",
    ),
    "Bold": (
        "Why Your {topic} Strategy is Failing (and How to Fix It)",
        "The One Thing You're Getting Wrong About {topic}",
        "Stop Wasting Time on {topic} and Do This Instead",
    ),
    "Witty": (
        "How to Win at {topic} Without Really Trying",
        "The {topic} Guide for People Who Hate Guides",
        "Confessions of a {topic} Expert",
    ),
    "Informative": (
        "A Comprehensive Overview of {topic}",
        "The Key Principles of Effective {topic}",
        "Exploring the Core Concepts of {topic}",
    ),
}

TONES = tuple(TEMPLATES)


class HeadlineGenerator:
    def generate(self, topic: str, tone: str) -> list[str]:
        if not isinstance(topic, str) or not topic.strip():
            raise InvalidInputError("Topic and tone are required.")
        if not isinstance(tone, str) or not tone.strip():
            raise InvalidInputError("Topic and tone are required.")

        # Unknown tones fall back to the default set
        templates = TEMPLATES.get(tone, TEMPLATES[DEFAULT_TONE])
        # str.replace keeps braces inside the topic literal
        return [template.replace("{topic}", topic) for template in templates]
