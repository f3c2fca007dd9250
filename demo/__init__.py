"""Demo-Abläufe der beiden Programme."""

from demo.office_demo import run_office_demo
from demo.patterns_demo import run_patterns_demo

__all__ = ["run_office_demo", "run_patterns_demo"]
