"""
Action directive subsystem.

Components:
- extractor.py: find the fenced ```action region (and strip it for display)
- decoder.py: payload -> typed ActionRequest (or ActionDecodeError)
- executor.py: ActionRequest + TaskStore -> result fragment
- pipeline.py: one conversational turn, end to end
"""
