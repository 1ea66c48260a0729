import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from polysolve.engine import solve_equation

logger = logging.getLogger(__name__)

app = FastAPI(title="polysolve API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

RENDER_STYLES = ("text", "html", "unicode")


class EquationRequest(BaseModel):
    equation: str
    render: str = "text"


class StepInfo(BaseModel):
    description: str
    expression: str
    explanation: str


class SolutionInfo(BaseModel):
    first: float | None = None
    second: float | None = None
    count: int | str


class SolveResponse(BaseModel):
    equation: str
    method: str
    steps: list[StepInfo]
    final_answer: str
    solutions: SolutionInfo
    verification_steps: list[StepInfo]


@app.post("/api/solve", response_model=SolveResponse)
def solve(req: EquationRequest):
    equation = req.equation.strip()
    if not equation:
        raise HTTPException(status_code=400, detail="Equation cannot be empty.")
    if req.render not in RENDER_STYLES:
        raise HTTPException(
            status_code=400,
            detail=f"render must be one of: {', '.join(RENDER_STYLES)}",
        )

    try:
        result = solve_equation(equation, {"render": req.render})
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Solver error for %r", equation)
        raise HTTPException(status_code=500, detail=f"Solver error: {str(e)}")

    return result
