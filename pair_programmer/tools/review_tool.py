"""
Code review prompts.

Three flavours share the same argument shape (``code`` plus optional
``context``) and differ in focus, fallback context and temperature:

- review: general quality review
- review_performance: bottlenecks and complexity
- review_security: vulnerabilities and remediation
"""

from __future__ import annotations

from typing import Any, Dict

REVIEW = "review"
REVIEW_DESCRIPTION = "Get comprehensive code review with actionable feedback"
REVIEW_TEMPERATURE = 0.3

PERFORMANCE = "review_performance"
PERFORMANCE_DESCRIPTION = "Analyze code for performance issues and optimization opportunities"
PERFORMANCE_TEMPERATURE = 0.3

SECURITY = "review_security"
SECURITY_DESCRIPTION = "Security-focused code review to identify vulnerabilities"
SECURITY_TEMPERATURE = 0.2

REVIEW_TEMPLATE = """\
Please provide a comprehensive code review for the following code.

Context: {context}

Code to review:
```
{code}
```

Please analyze:
1. Code quality and readability
2. Potential bugs or issues
3. Performance considerations
4. Security concerns
5. Best practices and improvements
6. Overall architecture and design

Provide specific, actionable feedback with examples where appropriate.
"""

PERFORMANCE_TEMPLATE = """\
Please analyze the following code for performance issues and optimization opportunities.

Usage context: {context}

Code to analyze:
```
{code}
```

Please identify:
1. Performance bottlenecks
2. Time complexity analysis
3. Space complexity concerns
4. Optimization opportunities
5. Caching strategies
6. Algorithm improvements
7. Resource usage concerns

Provide specific recommendations with code examples where applicable.
"""

SECURITY_TEMPLATE = """\
Please perform a security-focused review of the following code.

Security context: {context}

Code to analyze:
```
{code}
```

Please identify:
1. Security vulnerabilities (injection, XSS, etc.)
2. Authentication/authorization issues
3. Data validation concerns
4. Cryptographic weaknesses
5. Information disclosure risks
6. OWASP Top 10 considerations
7. Security best practices violations

Provide specific vulnerabilities with severity levels and remediation recommendations.
"""

NO_CONTEXT = "No additional context provided"
GENERAL_USAGE = "General purpose usage"
STANDARD_SECURITY = "Standard security requirements"


def _render(template: str, args: Dict[str, Any], fallback: str) -> str:
    context = args.get("context") or fallback
    return template.format(code=args["code"], context=context)


def build_review_prompt(args: Dict[str, Any]) -> str:
    return _render(REVIEW_TEMPLATE, args, NO_CONTEXT)


def build_performance_prompt(args: Dict[str, Any]) -> str:
    return _render(PERFORMANCE_TEMPLATE, args, GENERAL_USAGE)


def build_security_prompt(args: Dict[str, Any]) -> str:
    return _render(SECURITY_TEMPLATE, args, STANDARD_SECURITY)
