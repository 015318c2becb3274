from .registry import CASES, BeamLoadCase, CaseId, get_case, is_unselected, parse_case_id

__all__ = ["CASES", "BeamLoadCase", "CaseId", "get_case", "is_unselected", "parse_case_id"]
