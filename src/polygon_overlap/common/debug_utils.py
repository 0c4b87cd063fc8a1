import torch

def debug_points(points, msg=""):
    torch.set_printoptions(profile="full", linewidth=200)
    print("[debug points] {} ({} points)".format(msg, len(points)))
    if len(points) > 0:
        print(torch.stack(list(points)))
    torch.set_printoptions(profile="default", linewidth=80)

def check_isnan_isinf(tensor, msg=""):
    if torch.isnan(tensor).any() or torch.isinf(tensor).any():
        raise ValueError(msg)

def as_point(p):
    """
    Converts an (x, y) pair or tensor into an owned float64 tensor of shape [2].

    Raises:
    - ValueError if p does not hold exactly two finite coordinates.
    """
    point = torch.as_tensor(p, dtype=torch.float64).detach().clone()
    if point.shape != (2,):
        raise ValueError(
            "A point must have shape [2], got {}".format(list(point.shape)))
    check_isnan_isinf(point, "Point {} has a non-finite coordinate".format(point.tolist()))
    return point
