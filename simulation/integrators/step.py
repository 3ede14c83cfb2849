# simulation/integrators/step.py

import numpy as np

from simulation.results import AxisLog, SimulationResult

def integrate_one_step(model, x, u, dt, method="euler"):
    """
    Single-step propagation with Euler or RK4.

    Returns:
        x_next (np.ndarray)
        outputs (dict) from model.get_dx__dt() at the start of the step
    """
    method = method.lower()

    if method == "euler":
        dx, outputs = model.get_dx__dt(x, u)
        return x + dt * np.asarray(dx), outputs

    elif method == "rk4":
        k1, outputs = model.get_dx__dt(x, u)
        k2, _ = model.get_dx__dt(x + 0.5 * dt * k1, u)
        k3, _ = model.get_dx__dt(x + 0.5 * dt * k2, u)
        k4, _ = model.get_dx__dt(x + dt * k3, u)

        dx = (k1 + 2*k2 + 2*k3 + k4) / 6.0
        return x + dt * dx, outputs

    else:
        raise ValueError(f"Unknown method '{method}'")


def integrate(model, x0, u, time_array, method="euler"):
    """
    Propagate the model over `time_array` with time-varying inputs and log
    states, derivatives and model outputs.

    Args:
        model: Model instance exposing dx, outputs = model.get_dx__dt(x, u_k)
        x0 (np.ndarray): Initial state vector, shape (n_states,).
        u (np.ndarray): Control input array, shape (T, n_inputs).
        time_array (np.ndarray): Time vector, shape (T,), constant step.
        method (str): "euler" or "rk4".

    Returns:
        SimulationResult: Container with the axis log.
    """
    time_array = np.asarray(time_array, dtype=float)
    u = np.asarray(u, dtype=float).reshape(len(time_array), -1)
    x = np.array(x0, dtype=float)

    T = time_array.shape[0]
    if T < 2:
        raise ValueError("time_array needs at least two samples")
    n_states = x.shape[0]
    n_inputs = u.shape[1]

    dt = time_array[1] - time_array[0]  # assume constant time step

    x_traj = [x.copy()]
    dx_list = []
    a_list = []

    for k in range(1, T):
        x_next, outputs = integrate_one_step(model, x, u[k - 1], dt, method)
        dx_list.append((x_next - x) / dt)
        a_list.append(float(outputs.get("a", np.nan)))
        x = x_next
        x_traj.append(x.copy())

    # Pad dx, u and outputs with NaNs at t=0 to align with time/x
    dx_arr = np.vstack([np.full((1, n_states), np.nan), np.stack(dx_list)])
    u_arr = np.vstack([np.full((1, n_inputs), np.nan), u[:-1]])
    a_arr = np.concatenate([[np.nan], a_list])

    axis = AxisLog(
        time=time_array,
        x=np.stack(x_traj),
        dx=dx_arr,
        u=u_arr,
        a=a_arr,
    )
    return SimulationResult(axis=axis)
