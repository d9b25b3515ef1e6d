from domquery.model.segment import ExpressionType, Relation, SelectorSegment

__all__ = [
    "ExpressionType",
    "Relation",
    "SelectorSegment",
]
