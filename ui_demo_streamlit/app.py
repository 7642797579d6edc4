"""Streamlit demo UI for leverage-engine."""

from __future__ import annotations

import tempfile
from datetime import date, datetime
from pathlib import Path
from typing import Any

from leverage_engine.adapters import csv_adapter, json_adapter
from leverage_engine.config import Config
from leverage_engine.deviation import calculate_deviation
from leverage_engine.ideal_path import build_ideal_path, fallback_path_activities
from leverage_engine.milestones import expected_progress_today
from leverage_engine.recommendations import recommend_alternatives
from leverage_engine.report import TIMEFRAMES, build_efficiency_report, build_top_efficient_report
from leverage_engine.schema import Goal


def _parse_activities_from_path(file_path: str) -> list:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(file_path)
    if suffix == ".json":
        return json_adapter.parse(file_path)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _parse_uploaded(uploaded_file) -> list:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    return _parse_activities_from_path(temp_path)


def _ranking_rows(ranking: list) -> list[dict[str, Any]]:
    return [
        {
            "rank": entry.rank,
            "activity": entry.activity.description,
            "impact": entry.activity.impact,
            "effort": entry.activity.effort,
            "minutes": entry.activity.duration_minutes,
            "efficiency": entry.efficiency,
            "tier": entry.tier.label,
        }
        for entry in ranking
    ]


def run_engine(activities: list, settings: dict) -> dict[str, Any]:
    """Run all engine steps and return a UI-friendly result payload."""

    config = Config.from_env()
    now = settings["now"]
    today = now.date()

    efficiency = build_efficiency_report(activities, now, settings["timeframe"], settings["limit"], config)
    top = build_top_efficient_report(activities, limit=settings["limit"], config=config)

    alerts = []
    for activity in activities:
        recommendation = recommend_alternatives(activity, activities, now, config)
        if recommendation.should_alert:
            alerts.append((activity, recommendation))

    path = build_ideal_path(
        fallback_path_activities(settings["goal_title"], settings["path_start"]),
        created_at=now,
        ai_generated=False,
    )
    goal = Goal(id="ui_demo_goal", title=settings["goal_title"], progress_percentage=settings["progress"], ideal_path=path)

    return {
        "efficiency": efficiency,
        "top": top,
        "alerts": alerts,
        "path": path,
        "expected_today": expected_progress_today(path.milestones, today),
        "deviation": calculate_deviation(goal, goal.ideal_path, today),
    }


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Leverage Engine Demo", layout="wide")
    st.title("Leverage Engine — Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        uploaded = st.file_uploader("Upload activities", type=["csv", "json"])
        use_demo = st.checkbox("Load demo dataset", value=True)
        timeframe = st.selectbox("Timeframe", options=list(TIMEFRAMES), index=3)
        limit = st.number_input("Ranking size", min_value=1, max_value=50, value=10, step=1)
        goal_title = st.text_input("Goal", value="Close seed round")
        path_start = st.date_input("Path start", value=date.today())
        progress = st.slider("Current progress (%)", min_value=0, max_value=100, value=20)
        run = st.button("Run engine", type="primary")

    if not run:
        st.info("Configure inputs in the sidebar and click **Run engine**.")
        return

    try:
        if use_demo:
            activities = csv_adapter.parse("examples/sample_activities.csv")
            data_source = "demo dataset (examples/sample_activities.csv)"
        elif uploaded is not None:
            activities = _parse_uploaded(uploaded)
            data_source = f"uploaded file ({uploaded.name})"
        else:
            st.error("Please upload a CSV/JSON file or enable 'Load demo dataset'.")
            return

        if not activities:
            st.error("No activities were found in the selected input.")
            return

        settings = {
            "now": datetime.now(),
            "timeframe": timeframe,
            "limit": int(limit),
            "goal_title": goal_title or "My goal",
            "path_start": path_start,
            "progress": float(progress),
        }
        result = run_engine(activities, settings)

        st.success(f"Loaded {len(activities)} activities from {data_source}.")

        st.subheader("A) Efficiency Ranking")
        stats = result["efficiency"]["stats"]
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Activities", stats["total"])
        c2.metric("Average", f"{stats['average']:.2f}")
        c3.metric("Median", f"{stats['median']:.2f}")
        c4.metric("Highest", f"{stats['highest']:.2f}")
        st.table(_ranking_rows(result["efficiency"]["ranking"]))
        st.table([stats["distribution"]])

        st.subheader("B) Patterns & Insights")
        for insight in result["top"]["insights"]:
            st.write(f"**{insight['title']}**: {insight['description']}")
        if not result["top"]["insights"]:
            st.write("No insights yet.")

        st.subheader("C) Opportunity Cost Alerts")
        for activity, recommendation in result["alerts"]:
            st.warning(f"{activity.description}: {recommendation.message}")
            st.table(
                [
                    {"alternative": alt.title, "efficiency": alt.efficiency, "why": alt.reasoning}
                    for alt in recommendation.report.alternatives
                ]
            )
        if not result["alerts"]:
            st.write("No low-leverage activities found.")

        st.subheader("D) Ideal Path")
        st.table([{"date": m.date, "target": m.percentage, "milestone": m.description} for m in result["path"].milestones])
        d1, d2 = st.columns(2)
        d1.metric("Expected today", f"{result['expected_today']:.0f}%")
        deviation = result["deviation"]
        d2.metric("Status", deviation.status if deviation else "n/a")
        if deviation:
            st.write(deviation.message)

    except ValueError as exc:
        st.error(f"Input error: {exc}")
    except Exception:
        st.error("Something went wrong while running the demo. Please verify the input format.")


if __name__ == "__main__":
    main()
