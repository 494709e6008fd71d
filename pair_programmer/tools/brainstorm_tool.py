"""Brainstorming tool prompt."""

from __future__ import annotations

from typing import Any, Dict

NAME = "brainstorm"
DESCRIPTION = "Brainstorm creative solutions and explore ideas"
TEMPERATURE = 0.7

BRAINSTORM_TEMPLATE = """\
Let's brainstorm creative ideas and solutions for: {topic}

{constraints_line}

Please provide:
1. Multiple creative approaches or solutions
2. Pros and cons of each approach
3. Unconventional or innovative ideas
4. Practical implementation considerations
5. Potential challenges and how to address them

Be creative and think outside the box!
"""


def build_brainstorm_prompt(args: Dict[str, Any]) -> str:
    """Embed the topic and, when given, the constraints into the template."""
    constraints = args.get("constraints", "")
    constraints_line = f"Constraints/Requirements: {constraints}" if constraints else ""
    return BRAINSTORM_TEMPLATE.format(topic=args["topic"], constraints_line=constraints_line)
