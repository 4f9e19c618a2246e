from .seed import SEED_STEPS, seed
