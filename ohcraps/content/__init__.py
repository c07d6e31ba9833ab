from ohcraps.content.rules import RULES_CONTENT, RulesBlock, RulesSection

__all__ = ["RULES_CONTENT", "RulesBlock", "RulesSection"]
