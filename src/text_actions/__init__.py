"""llm-text-actions -- run text actions (translate, proofread, summarize...) against an LLM endpoint."""

__version__ = '0.1.0'
