"""FastAPI application factory."""

import logging
import random
from dataclasses import replace
from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import FastAPI, HTTPException, Query, Request, status
from fastapi.encoders import jsonable_encoder

from nutrition_planner.api.schemas import (
    FoodLogIn,
    PlanRequest,
    SubstitutionRequest,
)
from nutrition_planner.app_logging import configure_logging
from nutrition_planner.containers import AppContainer
from nutrition_planner.domain.errors import (
    InvalidActivityError,
    InvalidProfileError,
)
from nutrition_planner.domain.foods import FoodCategory
from nutrition_planner.domain.plans import WeeklyNutritionPlan
from nutrition_planner.services.meals import get_alternatives
from nutrition_planner.services.substitution import substitute_food


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/plans")
    async def create_plan(payload: PlanRequest, request: Request) -> dict[str, object]:
        """Generate a weekly nutrition plan."""
        state_container: AppContainer = request.app.state.container
        plan = _generate(state_container, payload)
        return {"plan": jsonable_encoder(plan)}

    @app.post("/plans/substitutions")
    async def substitute(
        payload: SubstitutionRequest, request: Request
    ) -> dict[str, object]:
        """Swap one food of a meal and return the rebalanced meal."""
        state_container: AppContainer = request.app.state.container
        if payload.food_index >= len(payload.foods):
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="food_index is out of range",
            )
        replacement = state_container.food_table.find(payload.replacement)
        if replacement is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown food: {payload.replacement}",
            )
        meal = substitute_food(
            payload.meal(),
            payload.food_index,
            replacement,
            food_table=state_container.food_table,
            category=payload.category,
            tolerance_kcal=state_container.planner.tolerance_kcal,
        )
        return {"meal": jsonable_encoder(meal)}

    @app.get("/foods/alternatives")
    async def alternatives(  # noqa: PLR0913
        request: Request,
        category: FoodCategory,
        allergies: Annotated[list[str] | None, Query()] = None,
        search: str | None = None,
        exclude: str | None = None,
        limit: int = 5,
    ) -> dict[str, object]:
        """Return allergy-safe foods of a category."""
        state_container: AppContainer = request.app.state.container
        foods = get_alternatives(
            category,
            allergies or [],
            food_table=state_container.food_table,
            exclude=exclude,
            search=search,
            limit=limit,
        )
        return {"foods": jsonable_encoder(foods)}

    @app.put("/users/{user_id}/goals")
    async def save_goals(
        user_id: UUID, payload: PlanRequest, request: Request
    ) -> dict[str, object]:
        """Store a plan's average daily macros as the user's goals."""
        state_container: AppContainer = request.app.state.container
        plan = _generate(state_container, payload)
        try:
            goals = state_container.goals_service.save_plan_goals(user_id, plan)
        except Exception as exc:
            logger.exception("Failed to save nutrition goals for %s", user_id)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Could not save goals. Please try again later.",
            ) from exc
        return {"goals": jsonable_encoder(goals)}

    @app.post("/users/{user_id}/food-logs", status_code=status.HTTP_201_CREATED)
    async def add_food_log(
        user_id: UUID, payload: FoodLogIn, request: Request
    ) -> dict[str, object]:
        """Log a reference food for a user."""
        state_container: AppContainer = request.app.state.container
        food = state_container.food_table.find(payload.food_name)
        if food is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown food: {payload.food_name}",
            )
        try:
            entry = state_container.food_log_service.add_food(
                user_id,
                food,
                payload.meal_type,
                payload.quantity,
                payload.logged_date,
            )
        except Exception as exc:
            logger.exception("Failed to save food log for %s", user_id)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Could not save food log. Please try again later.",
            ) from exc
        return {"log": jsonable_encoder(entry)}

    @app.get("/users/{user_id}/food-logs")
    async def list_food_logs(
        user_id: UUID, day: date, request: Request
    ) -> dict[str, object]:
        """Return a user's logs and totals for one day."""
        state_container: AppContainer = request.app.state.container
        logs = state_container.food_log_service.list_day(user_id, day)
        totals = state_container.food_log_service.daily_totals(user_id, day)
        return {"logs": jsonable_encoder(logs), "totals": jsonable_encoder(totals)}

    @app.delete(
        "/users/{user_id}/food-logs/{log_id}",
        status_code=status.HTTP_204_NO_CONTENT,
    )
    async def delete_food_log(user_id: UUID, log_id: UUID, request: Request) -> None:
        """Delete one of a user's logs."""
        state_container: AppContainer = request.app.state.container
        try:
            state_container.food_log_service.delete(log_id)
        except Exception as exc:
            logger.exception("Failed to delete food log %s for %s", log_id, user_id)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Could not delete food log. Please try again later.",
            ) from exc

    @app.get("/users/{user_id}/adherence")
    async def adherence(user_id: UUID, day: date, request: Request) -> dict[str, object]:
        """Return how well a day's intake matched the user's goals."""
        state_container: AppContainer = request.app.state.container
        report = state_container.adherence_service.daily_report(user_id, day)
        if report is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="No nutrition goals stored for this user",
            )
        return {"adherence": jsonable_encoder(report)}

    return app


def _generate(container: AppContainer, payload: PlanRequest) -> WeeklyNutritionPlan:
    """Run the planner for a request, honouring an optional seed."""
    planner = container.planner
    if payload.seed is not None:
        planner = replace(planner, rng=random.Random(payload.seed))
    try:
        return planner.generate_plan(payload.profile.to_domain(), payload.week())
    except (InvalidProfileError, InvalidActivityError) as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
