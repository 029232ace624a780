"""Transport-agnostic chat core: ports, state, persona, and turn orchestration."""
