from use_cases.subscription.create_subscription_use_case import CreateSubscriptionUseCase

__all__ = [
    "CreateSubscriptionUseCase",
]
