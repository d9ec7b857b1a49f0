import numpy as np

from youbot_kinematics.types.ik import NUM_JOINTS, JointLimits


def is_solution_valid(solution: np.ndarray, limits: JointLimits) -> bool:
    """
    Check if a branch solution lies inside the joint limits.

    Input:
        solution: Joint angles from the branch solver (empty if infeasible)
        limits: Inclusive per-joint limits
    Output:
        True if the solution has all 5 angles and each is within [min, max]
    """
    solution = np.asarray(solution, dtype=np.float64)
    if solution.shape != (NUM_JOINTS,):
        return False
    return bool(np.all((solution >= limits.lower) & (solution <= limits.upper)))
