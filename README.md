# trickball

A small simulation package built around a bouncing-ball model. A ball of fixed
mass moves in a plane under a central force field of constant magnitude. Its
state is advanced with a two-stage Runge-Kutta (RK2) step. A Regula Falsi root
finder is included for locating zero crossings of event functions.

## What is inside

- `trickball.regula_falsi` holds `RegulaFalsi`, the iteration control that
  estimates the time to go until an error function crosses zero, and `Mode`.
  `Mode` restricts the search to increasing or decreasing crossings, or allows
  either. `RegulaFalsi.reset(time)` clears the bounds.
  `RegulaFalsi.estimate(time)` returns the time to go: exactly `0.0` once the
  zero is found, and `BIG_TGO` (1000.0) while no crossing has been bracketed.
- `trickball.status` holds the `Status` values and `status_string`, which gives
  names such as `"fmi2OK"` or `"Unknown"`. It also holds the logging helpers
  `format_log_message`, which builds the line, and `fmi_log`, which prints it to
  standard output.
- `trickball.ball` holds the ball data classes: `BallState`, `BallStateInit`,
  `BallEnviron`, `BallEnvironState` and `BallExec`. It also holds the functions
  that work on them:
  - `environ_default_data`: a field of 8 N pulling towards the point (0, 2).
  - `state_default_data`: a mass of 10 kg at (5, 5), moving at 3.5 m/s at 45°.
  - `state_init`
  - `force_field`
  - `state_deriv`
  - `format_position`
  - `ball_print`
- `trickball.model` holds `BallModel`, which wraps the ball as a steppable
  model, and also `ModelMode` and `EventInfo`. A new model loads its start
  values. It offers:
  - real variables by reference number: `get_real` and `set_real`;
  - the continuous state vector (position and velocity):
    `get_continuous_states` and `set_continuous_states`;
  - `get_derivatives`;
  - `integrate(step)`, an RK2 step that also advances `time`;
  - `get_event_indicator`, which is always 0.0 because the ball defines no
    state events;
  - `activate_events`;
  - the diagnostic texts `describe_refs`, `describe_collect` and
    `describe_states`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using it from Python

```python
from trickball.model import BallModel

model = BallModel("trickBall", False)
for _ in range(10):
    model.integrate(0.1)
print(model.describe_states())
print(model.get_real(range(12)))
```

The variables are addressed by reference number:

| ref  | variable              |
|------|-----------------------|
| 0,1  | position x, y (m)     |
| 2,3  | velocity x, y (m/s)   |
| 4,5  | acceleration x, y     |
| 6    | mass (kg)             |
| 7,8  | field force x, y (N)  |
| 9,10 | force origin x, y (m) |
| 11   | force magnitude (N)   |

An unknown reference number raises `ValueError`.

## What it does not do

The package has no command-line program. It has no ready-made simulation loop
for co-simulation or model-exchange runs, and it writes no CSV logs. It has no
routine that searches for state events within a step. You drive the model
yourself: call `BallModel.integrate` in a loop, or pair `RegulaFalsi.estimate`
with your own event functions.