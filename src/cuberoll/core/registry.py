# The registry of step functions, keyed by game mode
STEP_REGISTRY = {}

def register_step(mode: str):
    def deco(fn):
        STEP_REGISTRY[mode] = fn
        return fn
    return deco

def get_step(mode: str):
    if mode not in STEP_REGISTRY:
        raise KeyError(f"Unknown game mode '{mode}'. Available: {', '.join(sorted(STEP_REGISTRY))}")
    return STEP_REGISTRY[mode]
