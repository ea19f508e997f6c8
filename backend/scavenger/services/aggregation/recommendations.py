"""
Data Risk Scavenger Recommended Actions

Ordered advice list for one pass. Deduplication across emails happens
when passes are merged.
"""

from typing import List, Optional, Sequence

from scavenger.models.sources import BreachRecord, EmailReputation
from .exposure import breach_data_classes


BASELINE_ACTIONS = [
    "Use a password manager to create and store strong, unique passwords",
    "Enable two-factor authentication on all important accounts",
]

CLOSING_ACTION = "Regularly scan your email for new breaches and data exposures"

BREACH_ACTION = "Change passwords for all accounts associated with your email"

# (data classes that trigger it, advice)
DATA_CLASS_ACTIONS = [
    (
        {"passwords", "password"},
        ["Immediately change passwords on all accounts, starting with financial and email accounts"],
    ),
    (
        {"credit cards", "credit card", "payment info"},
        [
            "Check your credit card statements for unauthorized charges",
            "Consider requesting a new credit card from your bank",
        ],
    ),
    (
        {"phone numbers", "phone number"},
        ["Be cautious of unexpected calls or SMS messages that may be phishing attempts"],
    ),
    (
        {"security questions", "security question"},
        ["Update security questions and answers on your important accounts"],
    ),
]

SUSPICIOUS_ACTION = (
    "Your email address appears suspicious. Consider using a different email address for important accounts."
)
CREDENTIALS_LEAKED_ACTION = "Credentials for this email have been leaked. Change all passwords immediately."
DATA_BREACH_ACTION = "This email appears in data breaches. Review all account security."


def generate_recommended_actions(
    breaches: Sequence[BreachRecord],
    reputation: Optional[EmailReputation] = None,
) -> List[str]:
    """Build the advice list from breach data classes and reputation flags."""
    actions: List[str] = list(BASELINE_ACTIONS)

    if breaches:
        actions.append(BREACH_ACTION)
        exposed = breach_data_classes(breaches)
        for triggers, advice in DATA_CLASS_ACTIONS:
            if exposed & triggers:
                actions.extend(advice)

    if reputation is not None:
        if reputation.suspicious:
            actions.append(SUSPICIOUS_ACTION)
        if reputation.details.credentials_leaked:
            actions.append(CREDENTIALS_LEAKED_ACTION)
        if reputation.details.data_breach:
            actions.append(DATA_BREACH_ACTION)

    actions.append(CLOSING_ACTION)
    return actions
