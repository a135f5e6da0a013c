"""Multi-step scheduler scenarios."""

from loan_scheduler.scenarios.repayment import RepaymentScenario, ScenarioReport

__all__ = ["RepaymentScenario", "ScenarioReport"]
