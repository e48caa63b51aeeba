"""
Totality tests: any string parses, and any parse result generates.

Feeds malformed and adversarial inputs through parse → generate under every
template and a range of section orders.
"""

import random

import pytest

from cvtex.contexts.intake.cv_data_structure import ParsedCV, SectionType
from cvtex.contexts.templating.converter import generate, parse

WEIRD_INPUTS = [
    "",
    "\n\n\n",
    "   \t  ",
    "---",
    "# ",
    "##",
    "**",
    "****",
    "|||",
    "- ",
    "\\",
    "{}}{",
    "%$&#_^~",
    "\r\n\r",
    "\u200b\ufeff\u00a0",
    "\ue000\ue001\ue0000\ue001",
    "EXPERIENCE\nEDUCATION\nSKILLS",
    "Jan 2020 - Present",
    "## Experience\n| | |\n- \n**\n- **",
    "## Experience\n- Jan 2020 - Present\n2019 - 2020",
    "## Education\n2020 - 2021\n- x\n| University |",
    "## Projects\n(Python)\n- a\n2023",
    "## Skills\n**:\n:\n**a**:",
    "## Awards\n**\n** x\n**a** **b** **",
    "## Volunteer Work\n[broken](link\n[text](url)",
    "Name\n" + "x@y.z\n" * 20 + "## Skills\nPython",
    "\n".join(f"## Section {index}\n- item {index}" for index in range(30)),
]

TEMPLATE_IDS = ["professional", "modern", "academic", "nonexistent", None]


def _orders():
    all_types = list(SectionType)
    shuffled = []
    rng = random.Random(7)
    for _ in range(3):
        order = list(all_types)
        rng.shuffle(order)
        shuffled.append(order)
    return [None, [], all_types, list(reversed(all_types)), ["bogus", "skills", "skills"], *shuffled]


@pytest.mark.integration
@pytest.mark.parametrize("text", WEIRD_INPUTS)
def test_parse_never_raises(text):
    assert isinstance(parse(text), ParsedCV)


@pytest.mark.integration
@pytest.mark.parametrize("text", WEIRD_INPUTS)
@pytest.mark.parametrize("template_id", TEMPLATE_IDS)
def test_generate_never_raises(text, template_id):
    cv = parse(text)
    for order in _orders():
        latex = generate(cv, template_id, order)
        assert "\\begin{document}" in latex
        assert latex.rstrip().endswith("\\end{document}")


@pytest.mark.integration
def test_sample_cv_under_every_order_and_template(sample_cv):
    for template_id in TEMPLATE_IDS:
        for order in _orders():
            first = generate(sample_cv, template_id, order)
            assert first == generate(sample_cv, template_id, order)
