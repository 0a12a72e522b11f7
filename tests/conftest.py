import pytest

from gridsearch import CornerCutting, SearchConfig, StepCost

REFERENCE_MAP = [
    ['.', '.', '.', '.', '.'],
    ['.', '@', '.', '.', '@'],
    ['.', '@', '@', '@', '.'],
    ['@', '@', '.', '.', '.'],
    ['.', '@', '.', '.', '.'],
]

MOVEMENT_MODELS = [
    (step_cost, corner_cutting)
    for step_cost in StepCost
    for corner_cutting in CornerCutting
]


@pytest.fixture
def reference_map():
    return [list(row) for row in REFERENCE_MAP]


@pytest.fixture
def uniform_config():
    return SearchConfig(step_cost=StepCost.UNIFORM)


@pytest.fixture
def forbid_config():
    return SearchConfig(corner_cutting=CornerCutting.FORBID)


@pytest.fixture(params=MOVEMENT_MODELS, ids=lambda m: f"{m[0].value}-{m[1].value}")
def any_config(request):
    step_cost, corner_cutting = request.param
    return SearchConfig(step_cost=step_cost, corner_cutting=corner_cutting)
