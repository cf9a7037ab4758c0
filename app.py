"""Child Care Gap Fee Calculator
============================

FY2026 rates (1 July 2025 – 30 June 2026)

Estimates the out-of-pocket cost of a child care session after the Child
Care Subsidy (CCS) and, where one applies, a state or territory program:

* ACT 3-Year-Old Preschool
* NSW Start Strong for Long Day Care
* QLD Free Kindy
* VIC Free Kinder

Run with ``streamlit run app.py``. All calculation happens in the
``childcare_gap`` package; this script only collects inputs and renders
results.
"""

from __future__ import annotations

import logging
import traceback
from dataclasses import asdict
from typing import Dict, List

import numpy as np
import pandas as pd
import plotly.express as px
import streamlit as st

from childcare_gap import (
    DEFAULTS,
    RATES_2026,
    WEEKDAYS,
    Session,
    calculate_act_daily,
    calculate_act_fortnightly,
    calculate_ccs_daily,
    calculate_ccs_fortnightly,
    calculate_nsw_daily,
    calculate_nsw_fortnightly_sessions,
    calculate_qld_daily,
    calculate_qld_fortnightly,
    calculate_vic_daily,
    calculate_vic_fortnightly_sessions,
    compute_weekly_gaps,
    estimate_ccs,
    higher_ccs_percent,
    is_applicable,
    repeat_fortnight,
    standard_ccs_percent,
)
from childcare_gap.act import ACT_TOTAL_PROGRAM_HOURS
from childcare_gap.nsw import AGE_GROUPS, FEE_RELIEF_TIERS
from childcare_gap.qld import QLD_KINDY_HOURS_PER_WEEK
from childcare_gap.rates import CARE_TYPES, activity_test_hours
from childcare_gap.vic import COHORTS

###############################################################################
# Logging & Error-Handling Helpers
###############################################################################
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s – %(levelname)s – %(message)s",
)
logger = logging.getLogger(__name__)


def safe_calculate(func, *args, **kwargs):
    """Wrapper that logs exceptions and shows an error instead of a result."""
    try:
        return func(*args, **kwargs)
    except Exception as exc:
        logger.error(f"Calculation error in {func.__name__}: {exc}")
        logger.error(traceback.format_exc())
        st.error(f"❌ Calculation error: {exc}")
        return None


###############################################################################
# Page setup
###############################################################################

st.set_page_config(page_title="Child Care Gap Fee Calculator (FY2026)",
                   page_icon=":child:",
                   layout="wide")

st.title("🧸 Child Care Gap Fee Calculator")
st.caption("Estimates only – FY2026 CCS rates and 2026 state program amounts.")

with st.expander("⚙️ Rate parameters"):
    st.json(RATES_2026, expanded=False)

###############################################################################
# Shared inputs
###############################################################################

st.header("Session & Subsidy")

col1, col2, col3 = st.columns(3)
ccs_percent = col1.number_input("CCS %", 0.0, 100.0, float(DEFAULTS["ccs_percent"]), step=1.0)
withholding = col1.number_input("CCS withholding %", 0.0, 100.0, float(DEFAULTS["ccs_withholding_percent"]), step=1.0)
session_fee = col2.number_input("Daily session fee ($)", 0.0, 1_000.0, float(DEFAULTS["session_fee"]), step=5.0)
days_per_week = int(col2.number_input("Days per week", 1, 5, int(DEFAULTS["days_per_week"])))
session_start = col3.number_input("Session start (hour, e.g. 8.5 = 8:30am)", 0.0, 24.0,
                                  float(DEFAULTS["session_start_hour"]), step=0.25)
session_end = col3.number_input("Session end (hour)", 0.0, 24.0, float(DEFAULTS["session_end_hour"]), step=0.25)
activity_tier = col1.selectbox("Recognised activity (hours/fortnight)",
                               list(RATES_2026["ccs"]["activity_test_hours"]), index=1)
ccs_hours = col2.number_input("CCS hours per fortnight", 0.0, 100.0,
                              float(activity_test_hours(activity_tier)), step=1.0)

session_hours = session_end - session_start

###############################################################################
# UI Helpers
###############################################################################


def fortnight_days(key: str, default_days: int, with_program: bool = False) -> List[Session]:
    """Ten-slot booking grid; every booked day uses the shared session."""
    st.markdown("**Fortnight bookings**")
    sessions = []
    program_start = program_hours = None
    if with_program:
        c1, c2 = st.columns(2)
        program_start = c1.number_input("Program start hour", 0.0, 24.0, 8.5, step=0.25, key=f"{key}_ps")
        program_hours = c2.number_input("Program hours per day", 0.0, 12.0, 6.0, step=0.5, key=f"{key}_ph")

    if st.checkbox("Same days both weeks", True, key=f"{key}_same"):
        cols = st.columns(len(WEEKDAYS))
        days, program_days = [], []
        for d, day in enumerate(WEEKDAYS):
            if cols[d].checkbox(day, d < default_days, key=f"{key}_d{d}"):
                days.append(d)
                if with_program and cols[d].checkbox("program", d == 0, key=f"{key}_pd{d}"):
                    program_days.append(d)
        session = Session(
            session_fee=session_fee,
            start_hour=session_start,
            end_hour=session_end,
            program_start_hour=program_start,
            program_end_hour=program_start + program_hours if with_program else None,
        )
        return repeat_fortnight(session, days, program_days)

    for week in (1, 2):
        cols = st.columns(len(WEEKDAYS))
        for d, day in enumerate(WEEKDAYS):
            booked = cols[d].checkbox(f"W{week} {day}", d < default_days, key=f"{key}_b{week}{d}")
            has_program = with_program and booked and cols[d].checkbox(
                "program", d == 0, key=f"{key}_p{week}{d}")
            sessions.append(Session(
                session_fee=session_fee if booked else 0.0,
                start_hour=session_start,
                end_hour=session_end,
                booked=booked,
                program_start_hour=program_start if has_program else None,
                program_end_hour=program_start + program_hours if has_program else None,
            ))
    return sessions


def show_fortnight(result, totals: Dict[str, str]):
    if result is None:
        return
    if not is_applicable(result):
        st.info(f"💡 Nothing to calculate ({result.reason.value.replace('_', ' ')}).")
        return
    df = pd.DataFrame([asdict(s) for s in result.sessions])
    st.dataframe(df, use_container_width=True)
    cols = st.columns(len(totals))
    for col, (label, attr) in zip(cols, totals.items()):
        col.metric(label, f"${getattr(result, attr):,.2f}")


def show_weekly_gaps(full_daily_ccs: float, daily_funding: float):
    gaps = compute_weekly_gaps(session_fee, session_hours, days_per_week, ccs_hours,
                               full_daily_ccs, daily_funding)
    if is_applicable(gaps):
        st.warning(
            f"⚠️ CCS hours run out during the fortnight: week 1 gap ${gaps.week1_gap:,.2f}/day, "
            f"week 2 gap ${gaps.week2_gap:,.2f}/day."
        )


def show_daily(result, fields: Dict[str, str]):
    if result is None:
        return
    if not is_applicable(result):
        st.info(f"💡 Nothing to calculate ({result.reason.value.replace('_', ' ')}).")
        return
    cols = st.columns(len(fields))
    for col, (label, attr) in zip(cols, fields.items()):
        col.metric(label, f"${getattr(result, attr):,.2f}")


###############################################################################
# Main Application – Tabs
###############################################################################

tab_ccs, tab_act, tab_nsw, tab_qld, tab_vic, tab_est = st.tabs([
    "🇦🇺 CCS", "ACT Preschool", "NSW Start Strong", "QLD Free Kindy", "VIC Free Kinder", "🧮 CCS % estimator"])

# ---------------------------------------------------------------------------
# CCS only
# ---------------------------------------------------------------------------
with tab_ccs:
    c1, c2 = st.columns(2)
    care_type = c1.selectbox("Care type", CARE_TYPES)
    school_age = c2.checkbox("School-age child", care_type == "oshc")
    daily = safe_calculate(calculate_ccs_daily, ccs_percent, withholding, session_fee,
                           session_start, session_end, care_type, school_age)
    show_daily(daily, {"CCS entitlement": "ccs_entitlement", "Withholding": "ccs_withholding",
                       "Gap fee": "estimated_gap_fee"})
    if daily:
        st.caption(f"Hourly rate cap ${daily.hourly_rate_cap:.2f} · CCS ${daily.ccs_hourly_rate:.2f}/hr")
        show_weekly_gaps(daily.ccs_entitlement, 0.0)
    fortnight = safe_calculate(calculate_ccs_fortnightly, fortnight_days("ccs", days_per_week),
                               ccs_percent, withholding, ccs_hours, care_type, school_age)
    show_fortnight(fortnight, {"Fees": "total_session_fees", "CCS": "total_ccs_entitlement",
                               "Gap": "total_gap_fee"})

# ---------------------------------------------------------------------------
# ACT
# ---------------------------------------------------------------------------
with tab_act:
    c1, c2 = st.columns(2)
    preschool_hours = c1.selectbox("Preschool hours per day", [6.0, 7.5])
    program_weeks = round(ACT_TOTAL_PROGRAM_HOURS / preschool_hours)
    c2.metric("Program weeks", program_weeks)
    daily = safe_calculate(calculate_act_daily, ccs_percent, withholding, session_fee,
                           session_start, session_end, preschool_hours)
    show_daily(daily, {"CCS (before withholding)": "ccs_amount", "Gap before preschool": "gap_before_kindy",
                       "Preschool funding": "kindy_funding_amount", "Gap fee": "estimated_gap_fee"})
    if daily:
        show_weekly_gaps(daily.ccs_entitlement, daily.kindy_funding_amount)
    fortnight = safe_calculate(calculate_act_fortnightly, fortnight_days("act", days_per_week, with_program=True),
                               ccs_percent, withholding, ccs_hours, program_weeks)
    show_fortnight(fortnight, {"Fees": "total_session_fees", "CCS": "total_ccs_entitlement",
                               "Preschool": "total_kindy_funding", "Gap": "total_gap_fee"})

# ---------------------------------------------------------------------------
# NSW
# ---------------------------------------------------------------------------
with tab_nsw:
    c1, c2, c3 = st.columns(3)
    age_group = c1.selectbox("Age group", AGE_GROUPS)
    tier = c2.selectbox("Fee relief tier", FEE_RELIEF_TIERS)
    service_weeks = c3.number_input("Service operating weeks", 1, 52, 50)
    daily = safe_calculate(calculate_nsw_daily, ccs_percent, withholding, session_fee, session_start,
                           session_end, age_group, tier, service_weeks, days_per_week)
    show_daily(daily, {"Weekly relief": "weekly_fee_relief", "Daily relief": "daily_fee_relief",
                       "Gap fee": "estimated_gap_fee"})
    if daily:
        show_weekly_gaps(daily.ccs_entitlement, daily.daily_fee_relief)
    fortnight = safe_calculate(calculate_nsw_fortnightly_sessions, fortnight_days("nsw", days_per_week),
                               ccs_percent, withholding, ccs_hours, age_group, tier, service_weeks)
    show_fortnight(fortnight, {"Fees": "total_session_fees", "CCS": "total_ccs_entitlement",
                               "Fee relief": "total_top_up", "Gap": "total_gap_fee"})

# ---------------------------------------------------------------------------
# QLD
# ---------------------------------------------------------------------------
with tab_qld:
    kindy_hours = st.number_input("Kindy program hours per day", 0.0, float(QLD_KINDY_HOURS_PER_WEEK), 7.5, step=0.5)
    daily = safe_calculate(calculate_qld_daily, ccs_percent, withholding, session_fee,
                           session_start, session_end, kindy_hours)
    show_daily(daily, {"CCS": "ccs_entitlement", "Gap before kindy": "gap_before_kindy",
                       "Free Kindy": "kindy_funding_amount", "Gap fee": "estimated_gap_fee"})
    if daily:
        show_weekly_gaps(daily.ccs_entitlement, daily.kindy_funding_amount)
    fortnight = safe_calculate(calculate_qld_fortnightly, fortnight_days("qld", days_per_week, with_program=True),
                               ccs_percent, withholding, ccs_hours)
    show_fortnight(fortnight, {"Fees": "total_session_fees", "CCS": "total_ccs_entitlement",
                               "Free Kindy": "total_kindy_funding", "Gap": "total_gap_fee"})

# ---------------------------------------------------------------------------
# VIC
# ---------------------------------------------------------------------------
with tab_vic:
    c1, c2 = st.columns(2)
    cohort = c1.selectbox("Cohort", COHORTS)
    kinder_hours = c2.number_input("Enrolled kinder hours per week", 0.0, 15.0, 15.0, step=0.5)
    daily = safe_calculate(calculate_vic_daily, ccs_percent, withholding, session_fee, session_start,
                           session_end, cohort, kinder_hours, days_per_week)
    show_daily(daily, {"Annual offset": "annual_offset", "Weekly offset": "weekly_offset",
                       "Daily offset": "daily_offset", "Gap fee": "estimated_gap_fee"})
    if daily:
        show_weekly_gaps(daily.ccs_entitlement, daily.daily_offset)
    fortnight = safe_calculate(calculate_vic_fortnightly_sessions, fortnight_days("vic", days_per_week),
                               ccs_percent, withholding, ccs_hours, cohort, kinder_hours)
    show_fortnight(fortnight, {"Fees": "total_session_fees", "CCS": "total_ccs_entitlement",
                               "Free Kinder": "total_top_up", "Gap": "total_gap_fee"})

# ---------------------------------------------------------------------------
# CCS % estimator
# ---------------------------------------------------------------------------
with tab_est:
    c1, c2 = st.columns(2)
    income = c1.number_input("Family adjusted taxable income ($ p.a.)", 0, 700_000, 120_000, step=1_000)
    children = int(c2.number_input("Children in care", 1, 6, 1))
    use_higher = c2.checkbox("Second or later child under 6", children > 1)
    estimate = estimate_ccs(income, children, use_higher)
    c1.metric("Applicable CCS %", f"{estimate.applicable_percent}%")
    st.caption(f"Standard {estimate.standard_percent}% · Higher {estimate.higher_percent}% · "
               f"hourly rate cap ${estimate.hourly_rate_cap:.2f}")

    incomes = np.arange(0, 560_001, 1_000)
    df = pd.DataFrame({
        "Income": incomes,
        "Standard": [standard_ccs_percent(i) for i in incomes],
        "Higher": [higher_ccs_percent(i) for i in incomes],
    })
    fig = px.line(df, x="Income", y=["Standard", "Higher"], title="CCS % vs family income",
                  labels={"Income": "Adjusted taxable income ($)", "value": "CCS %"})
    fig.add_vline(x=income, line_dash="dash")
    st.plotly_chart(fig, use_container_width=True)
