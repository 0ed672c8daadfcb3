"""Built-in playbooks.

Two variants of the hero chat ship with the package:
- constraints: process-constraint walkthrough with topic-routed follow-ups
- refinery: tag-level Q&A over a crude unit, with the auto-send demo on
"""

from .models import AnswerRule, AutoPilotSettings, EngineTimings, KeywordClause, Playbook

# ============================================
# Constraints variant
# ============================================

CONSTRAINTS_PLAYBOOK = Playbook(
    name="constraints",
    title="ChatAPC",
    description="Constraint, optimization and process-change walkthrough",
    welcome_message=(
        "Welcome to ChatAPC! I'm your AI assistant for process control and optimization. "
        "I can help you analyze constraints, identify opportunities, and optimize your "
        "plant operations in real-time.\n\n"
        "Let's get started with some common questions you might have:"
    ),
    starter_suggestions=[
        "Analyze my current process constraints",
        "Show me optimization opportunities",
        "Explain recent process changes",
    ],
    suggestion_pool=[
        "Analyze my current process constraints",
        "Show me optimization opportunities",
        "Explain recent process changes",
        "Review equipment performance trends",
        "Identify energy efficiency improvements",
        "Check control loop stability",
        "Analyze production bottlenecks",
        "Review safety system status",
        "Examine quality control metrics",
        "Assess maintenance requirements",
        "Monitor environmental compliance",
        "Evaluate cost reduction opportunities",
        "Check alarm system performance",
        "Review operator performance data",
        "Analyze raw material efficiency",
    ],
    rules=[
        AnswerRule(
            name="constraints",
            clauses=[KeywordClause(all_of=["constraint"])],
            reply=(
                "I've analyzed your current process constraints and identified several key areas:\n\n"
                "• **Active Constraints**: 3 control loops currently at their limits\n"
                "• **Bottleneck Analysis**: Unit 200 reactor temperature is the primary constraint\n"
                "• **Impact Assessment**: Current constraints are reducing throughput by ~12%\n"
                "• **Economic Impact**: Estimated $45K/day in lost revenue potential\n\n"
                "The main constraint appears to be the reactor temperature limit (TI-200), which is "
                "preventing higher feed rates and limiting overall production capacity."
            ),
            related_topics=["optimization", "equipment", "bottleneck"],
        ),
        AnswerRule(
            name="optimization",
            clauses=[
                KeywordClause(all_of=["optimization"]),
                KeywordClause(all_of=["opportunities"]),
            ],
            reply=(
                "I've identified several optimization opportunities in your current process:\n\n"
                "• **Control Loop Tuning**: 4 loops showing suboptimal response times\n"
                "• **Setpoint Optimization**: Temperature and pressure targets could be adjusted\n"
                "• **Advanced Control**: Potential for implementing multivariable control strategies\n"
                "• **Economic Potential**: Estimated $200K+ annual savings opportunity\n\n"
                "The highest-impact opportunity involves optimizing your reactor temperature control "
                "strategy, which could improve throughput by 6-8%."
            ),
            related_topics=["energy", "control", "cost"],
        ),
        AnswerRule(
            name="process-changes",
            clauses=[KeywordClause(all_of=["changes"])],
            reply=(
                "Recent process changes detected in your system:\n\n"
                "• **Last 4 hours**: Feed composition shifted by 3.2% (higher C3 content)\n"
                "• **Control Adjustments**: 2 setpoints modified by operations team\n"
                "• **Equipment Performance**: Compressor C-101 efficiency decreased to 92%\n"
                "• **Overall Impact**: Unit efficiency down 1.8% from normal operation\n\n"
                "The most significant change was the feed composition shift, which has affected "
                "downstream separation efficiency and increased reboiler duty."
            ),
            related_topics=["equipment", "quality", "performance"],
        ),
    ],
    fallback_reply=(
        "I can help you with various aspects of process control and optimization:\n\n"
        "• **Real-time Analysis**: Monitor constraints and performance indicators\n"
        "• **Optimization**: Identify improvement opportunities and cost savings\n"
        "• **Troubleshooting**: Diagnose issues and recommend solutions\n"
        "• **Reporting**: Generate insights and performance summaries\n\n"
        "I have access to your current process data and can provide specific insights "
        "tailored to your plant operations."
    ),
    thinking_stages=[
        "Analyzing real-time process data...",
        "Checking control loop performance...",
        "Reviewing constraint status...",
        "Generating insights...",
        "Preparing recommendations...",
    ],
    strip_markdown=True,
    timings=EngineTimings(
        startup_delay_ms=1500,
        cadence_ms=25,
        thinking_delay_ms=7500,
        thinking_indicator_delay_ms=800,
        stage_interval_ms=1500,
        suggestion_reveal_delay_ms=0,
    ),
    autopilot=AutoPilotSettings(enabled=False),
)

# ============================================
# Refinery variant
# ============================================

REFINERY_PLAYBOOK = Playbook(
    name="refinery",
    title="ChatAPC",
    description="Tag-level questions about a crude unit, auto-send demo enabled",
    welcome_message=(
        "ChatAPC blends deep engineering expertise with advanced AI to deliver clear, "
        "data-driven insights. It identifies issues early, explains process behavior "
        "intuitively, and reveals untapped opportunities for improved performance and "
        "profit, all in plain language."
    ),
    starter_suggestions=[
        "When did TI100 start violating the high limit?",
        "How can we increase the margin of the CDU?",
        "What is TI100?",
    ],
    suggestion_pool=[
        "When did TI100 start violating the high limit?",
        "How can we increase the margin of the CDU?",
        "What is TI100?",
        "What is kerosene flash point influenced by?",
        "What is the feed of C101",
        "Check if the APC limits on the Debutanizer are correct",
        "How can I increase the kerosene flash point from 42 degC to 43 degC",
        "Why is the draw temperature above its limit?",
        "Can I increase the feed from 1000 t/h to 1100 t/h?",
        "What is E201",
    ],
    rules=[
        AnswerRule(
            name="ti100-violation",
            clauses=[KeywordClause(all_of=["ti100", "violating"])],
            reply=(
                "TI100 exceeded its high limit at 14:32 on October 10, remaining above the limit "
                "for 45 minutes.\n\n"
                "This extended violation indicates a sustained process disturbance that should be "
                "investigated to prevent recurrence."
            ),
        ),
        AnswerRule(
            name="cdu-margin",
            clauses=[KeywordClause(all_of=["increase", "margin", "cdu"])],
            reply=(
                "The margin of the CDU can be increased from 3.5 EUR/ton to 3.8 EUR/ton by "
                "performing the following action:\n\n"
                "- Increase the Top pumparound flow APC high limit from 600 ton/hr to 650 ton/hr "
                "(safely below the equipment maximum of 700 ton/hr)\n"
                "- Expected margin improvement: +0.3 EUR/ton\n\n"
                "This optimization opportunity could deliver significant annual savings while "
                "maintaining safe operating conditions."
            ),
        ),
        AnswerRule(
            name="ti100-definition",
            clauses=[KeywordClause(all_of=["what is ti100"])],
            reply=(
                "TI100 is the temperature indicator on the kerosene stripper overhead line, "
                "measuring vapor temperature.\n\n"
                "- Current value: 212.2°C\n"
                "- 8-hour average: 210.8°C\n"
                "- Location: Overhead vapor line of kerosene stripper\n\n"
                "This measurement is critical for monitoring stripper performance and product "
                "quality control."
            ),
        ),
        AnswerRule(
            name="flash-point-drivers",
            clauses=[KeywordClause(all_of=["kerosene flash point", "influenced"])],
            reply=(
                "Kerosene flash point AI100 is influenced by two primary factors:\n\n"
                "1. Top temperature TC101 - Higher temperatures increase flash point\n"
                "2. Stripping steam FC200 - Increased steam flow raises flash point by removing "
                "light ends\n\n"
                "These variables can be adjusted to optimize the flash point specification while "
                "maintaining product quality."
            ),
        ),
        AnswerRule(
            name="c101-feed",
            clauses=[
                KeywordClause(all_of=["feed of c101"]),
                KeywordClause(all_of=["what is", "feed", "c101"]),
            ],
            reply=(
                "The feed of stabilizer column C101 is:\n"
                "- Stream: S01\n"
                "- Source: Heat exchanger E101 outlet\n"
                "- Description: Pre-heated hydrocarbon feed entering the stabilizer for "
                "light-ends removal\n\n"
                "This feed stream's temperature and composition significantly affect the "
                "stabilizer's separation efficiency."
            ),
        ),
        AnswerRule(
            name="debutanizer-apc-limits",
            clauses=[KeywordClause(all_of=["apc limits", "debutanizer"])],
            reply=(
                "Analysis of the Debutanizer APC limits reveals an optimization opportunity:\n\n"
                "Recommendation: Reduce the APC low limit on the reboiler flow from 65 ton/hr to "
                "60 ton/hr (equipment low limit)\n\n"
                "Economic Impact:\n"
                "- Margin increase: 3.4 EUR/ton → 3.6 EUR/ton (+0.2 EUR/ton)\n"
                "- Annual benefit: 156k EUR/year\n\n"
                "The current limit is unnecessarily conservative and constraining profitability. "
                "The equipment can safely operate at 60 ton/hr."
            ),
        ),
        AnswerRule(
            name="flash-point-increase",
            clauses=[
                KeywordClause(all_of=["increase", "kerosene flash point"], any_of=["42", "43"]),
            ],
            reply=(
                "Kerosene Flash point AI100 can be increased from 42°C to 43°C by performing the "
                "following actions:\n"
                "- Increase top temperature from 110.8°C to 112.3°C (+1.5°C)\n"
                "- Increase stripping steam to the process high limit of 600 kg/hr\n\n"
                "These adjustments will remove lighter components more effectively, raising the "
                "flash point to meet your target specification while maintaining column stability."
            ),
        ),
        AnswerRule(
            name="draw-temperature",
            clauses=[KeywordClause(all_of=["draw temperature", "above", "limit"])],
            reply=(
                "The draw temperature is high because the kerosene draw flow is constrained at its "
                "APC low limit.\n\n"
                "When the draw flow hits its lower constraint, it cannot be reduced further to "
                "control the temperature, causing the temperature to rise above its limit.\n\n"
                "Solution: Either increase the draw flow limit or adjust upstream conditions to "
                "reduce the temperature driving force."
            ),
        ),
        AnswerRule(
            name="feed-increase",
            clauses=[KeywordClause(all_of=["increase", "feed"], any_of=["1000", "1100"])],
            reply=(
                "No, the feed cannot be increased from 1000 t/h to 1100 t/h.\n\n"
                "Constraint: Column differential pressure (ΔP)\n"
                "- Current ΔP: 0.3 bar\n"
                "- Projected ΔP at 1100 t/h: 0.6 bar\n"
                "- Column limit: 0.55 bar\n\n"
                "Increasing the feed to 1100 t/h would exceed the column's pressure limit by "
                "0.05 bar, risking flooding and potential equipment damage. The maximum safe feed "
                "rate is lower than 1100 t/h."
            ),
        ),
        AnswerRule(
            name="e201-definition",
            clauses=[KeywordClause(all_of=["what is e201"])],
            reply=(
                "E201 is a shell-and-tube heat exchanger with the following configuration:\n"
                "- Type: Shell-and-tube heat exchanger\n"
                "- Hot side (shell): Kerosene flow from Main Fractionator C101\n"
                "- Cold side (tubes): Cooling water\n"
                "- Function: Cools kerosene product to storage temperature\n\n"
                "This exchanger is critical for product cooling and heat recovery in the "
                "fractionation section."
            ),
        ),
    ],
    fallback_reply=(
        "I can help you with various aspects of process control and optimization:\n\n"
        "- Equipment Information: Details on instruments, vessels, and heat exchangers\n"
        "- Process Analysis: Temperature trends, pressure limits, and flow constraints\n"
        "- Optimization Opportunities: Margin improvements and limit adjustments\n"
        "- Troubleshooting: Root cause analysis and corrective actions\n\n"
        "I have access to your current process data and can provide specific insights "
        "tailored to your plant operations. Try asking about specific tags, equipment, or "
        "optimization opportunities!"
    ),
    thinking_stages=[
        "connecting to process data...",
        "navigating knowledge map...",
        "preparing answer...",
    ],
    strip_markdown=True,
    timings=EngineTimings(
        startup_delay_ms=500,
        cadence_ms=25,
        thinking_delay_ms=1400,
        thinking_indicator_delay_ms=180,
        stage_interval_ms=800,
        suggestion_reveal_delay_ms=3000,
    ),
    autopilot=AutoPilotSettings(
        enabled=True,
        first_delay_ms=6000,
        repeat_delay_ms=12000,
        min_gap_ms=9000,
    ),
)

BUILTIN_PLAYBOOKS: dict[str, Playbook] = {
    CONSTRAINTS_PLAYBOOK.name: CONSTRAINTS_PLAYBOOK,
    REFINERY_PLAYBOOK.name: REFINERY_PLAYBOOK,
}

DEFAULT_PLAYBOOK = CONSTRAINTS_PLAYBOOK.name
