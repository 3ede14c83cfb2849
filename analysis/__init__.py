from .profile_metrics import compute_profile_metrics, compute_tracking_metrics

__all__ = ["compute_profile_metrics", "compute_tracking_metrics"]
