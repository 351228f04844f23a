from shopkit.rules.loader import load_rules, resolve_rules
from shopkit.rules.models import Rules

__all__ = ["Rules", "load_rules", "resolve_rules"]
