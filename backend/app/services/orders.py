from typing import Iterable

from app.models.food_order import FoodOrder, OrderStatus


def order_stats(orders: Iterable[FoodOrder]) -> dict:
    """
    Dashboard counters for a store's orders.
    Revenue counts delivered orders only; average order value spans all orders;
    average rating spans rated orders only.
    """
    orders = list(orders)
    counts = {s: 0 for s in OrderStatus}
    for o in orders:
        counts[OrderStatus(o.status)] += 1

    total = len(orders)
    amounts = [float(o.total_amount or 0) for o in orders]
    delivered_revenue = sum(
        float(o.total_amount or 0) for o in orders if OrderStatus(o.status) == OrderStatus.delivered
    )
    ratings = [float(o.rating) for o in orders if o.rating]

    return {
        "total_orders": total,
        "pending_orders": counts[OrderStatus.pending],
        "confirmed_orders": counts[OrderStatus.confirmed],
        "preparing_orders": counts[OrderStatus.preparing],
        "ready_orders": counts[OrderStatus.ready],
        "out_for_delivery_orders": counts[OrderStatus.out_for_delivery],
        "delivered_orders": counts[OrderStatus.delivered],
        "cancelled_orders": counts[OrderStatus.cancelled],
        "total_revenue": delivered_revenue,
        "average_order_value": sum(amounts) / total if total else 0,
        "average_rating": sum(ratings) / len(ratings) if ratings else 0,
    }
