from __future__ import annotations
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Sequence
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from letterboxed.app import SolveParams, error_response, solve_letter_boxed
from letterboxed.errors import ConfigError
from letterboxed.grid import build_puzzle, is_solution, validate_chain
from letterboxed.io_utils import parse_prior_words
from letterboxed.service import get_corpus

MAX_WORDS = 12


@asynccontextmanager
async def lifespan(app: FastAPI):
    print("\nLetter Boxed API: http://127.0.0.1:8000/docs\n")
    yield


app = FastAPI(title="Letter Boxed Solver API", version="1.0", lifespan=lifespan)

# CORS: any origin may call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class SolveRequest(BaseModel):
    sides: List[str] = Field(..., min_length=4, max_length=4, description="Top, right, bottom, left. 3 letters each.")
    prior_words: str = Field("", description="Words to start with, space or comma separated.")
    max_words: int = Field(2, le=MAX_WORDS)
    max_results: int = Field(25, ge=1, le=200)
    allow_no_progress: bool = False
    shortest_first: bool = False
    include_details: bool = False


class CheckRequest(BaseModel):
    sides: List[str] = Field(..., min_length=4, max_length=4)
    words: str = Field(..., description="Candidate answer, space or comma separated.")


@app.get("/health")
def health() -> Dict[str, Any]:
    return {"ok": True}


@app.exception_handler(OSError)
@app.exception_handler(UnicodeDecodeError)
async def wordlist_unavailable(request: Request, exc: Exception) -> JSONResponse:
    # raised by get_corpus while resolving /solve
    return JSONResponse(error_response(f"Word list could not be loaded: {exc}", type(exc).__name__))


# sync handler: FastAPI runs it in the threadpool
@app.post("/solve")
def solve(req: SolveRequest, corpus: Sequence[str] = Depends(get_corpus)) -> Dict[str, Any]:
    params = SolveParams(
        max_words=req.max_words,
        max_results=req.max_results,
        allow_no_progress=req.allow_no_progress,
        shortest_first=req.shortest_first,
    )

    result = solve_letter_boxed(req.sides, req.prior_words, corpus, params)

    # error dicts pass through unchanged
    if not result.get("ok", False):
        return result

    clean: Dict[str, Any] = {
        "ok": True,
        "text": result["text"],
        "solutions": result["solutions"],
    }
    if "closest" in result:
        clean["closest"] = result["closest"]

    if req.include_details:
        clean["sides"] = result["sides"]
        clean["prior_words"] = result["prior_words"]
        clean["params"] = result["params"]
        clean["candidate_stats"] = result["candidate_stats"]
    return clean


@app.post("/check")
def check(req: CheckRequest) -> Dict[str, Any]:
    try:
        puzzle = build_puzzle(*req.sides)
    except ConfigError as exc:
        return {"ok": False, "error": str(exc), "error_type": type(exc).__name__}

    words = parse_prior_words(req.words)
    return {
        "ok": True,
        "words": words,
        "valid": validate_chain(puzzle, words),
        "complete": is_solution(puzzle, words),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
