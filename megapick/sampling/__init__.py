from .sampler import pick_batch, pick_one

__all__ = ["pick_one", "pick_batch"]
