# Schemas package init: Pydantic response envelopes (see note.py)
