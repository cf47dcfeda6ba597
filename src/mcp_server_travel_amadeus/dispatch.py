"""
Tool dispatch for the Amadeus MCP server.

Every catalog entry maps to exactly one handler. A handler receives the shared
`amadeus.Client` and the raw argument mapping and performs a single SDK call,
returning the SDK `Response`. Arguments are forwarded as received; the
upstream API is the only validator.
"""

import asyncio
import json
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from amadeus import Client, ResponseError
from mcp import types

from .client import AmadeusClientProvider
from .logs import log_error, log_info

Arguments = Dict[str, Any]
Handler = Callable[[Client, Arguments], Any]


class UnknownToolError(LookupError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class CatalogMismatchError(RuntimeError):
    """The tool catalog and the handler table do not cover the same names."""


# ============================================================================
# HANDLERS
# ============================================================================
# Query-style endpoints take the arguments as keyword parameters, body-style
# endpoints take them as the JSON body. Path identifiers are read with .get()
# so a missing id reaches the SDK as None instead of failing here.

def _flight_create_order(client: Client, args: Arguments):
    return client.booking.flight_orders.post(args.get("flightOffers"), args.get("travelers"))


def _hotel_booking(client: Client, args: Arguments):
    return client.booking.hotel_bookings.post(
        args.get("offerId"), args.get("guests"), args.get("payments")
    )


def _transfer_booking(client: Client, args: Arguments):
    return client.ordering.transfer_orders.post(args, offerId=args.get("offerId"))


def _transfer_cancellation(client: Client, args: Arguments):
    # Empty body; confirmNbr and any other extra fields travel as query parameters
    params = {key: value for key, value in args.items() if key != "transferOrderId"}
    order = client.ordering.transfer_order(args.get("transferOrderId"))
    return order.transfers.cancellation.post({}, **params)


TOOL_HANDLERS: Dict[str, Handler] = {
    # Flight shopping & booking
    "flight_offers_search": lambda c, a: c.shopping.flight_offers_search.get(**a),
    "flight_offers_pricing": lambda c, a: c.shopping.flight_offers.pricing.post(a.get("flightOffers")),
    "flight_create_order": _flight_create_order,
    "flight_order_get": lambda c, a: c.booking.flight_order(a.get("flightOrderId")).get(),
    "flight_order_delete": lambda c, a: c.booking.flight_order(a.get("flightOrderId")).delete(),
    "flight_inspiration_search": lambda c, a: c.shopping.flight_destinations.get(**a),
    "flight_cheapest_date_search": lambda c, a: c.shopping.flight_dates.get(**a),
    "flight_availability_search": lambda c, a: c.shopping.availability.flight_availabilities.post(a),
    "seatmap_display": lambda c, a: c.shopping.seatmaps.post(a),
    "branded_fares_upsell": lambda c, a: c.shopping.flight_offers.upselling.post(a),
    "flight_choice_prediction": lambda c, a: c.shopping.flight_offers.prediction.post(a),
    # Hotels
    "hotel_offers_search": lambda c, a: c.shopping.hotel_offers_search.get(**a),
    "hotel_offer_search": lambda c, a: c.shopping.hotel_offer_search(a.get("offerId")).get(),
    "hotel_booking": _hotel_booking,
    "hotel_list_by_city": lambda c, a: c.reference_data.locations.hotels.by_city.get(**a),
    "hotel_list_by_geocode": lambda c, a: c.reference_data.locations.hotels.by_geocode.get(**a),
    "hotel_sentiments": lambda c, a: c.e_reputation.hotel_sentiments.get(**a),
    # Points of interest & activities
    "points_of_interest_search": lambda c, a: c.reference_data.locations.points_of_interest.get(**a),
    "points_of_interest_by_square": lambda c, a: c.reference_data.locations.points_of_interest.by_square.get(**a),
    "point_of_interest_details": lambda c, a: c.reference_data.locations.point_of_interest(a.get("poiId")).get(),
    "activities_search": lambda c, a: c.shopping.activities.get(**a),
    "activities_by_square": lambda c, a: c.shopping.activities.by_square.get(**a),
    "activity_details": lambda c, a: c.shopping.activity(a.get("activityId")).get(),
    # Transfers
    "transfer_search": lambda c, a: c.shopping.transfer_offers.post(a),
    "transfer_booking": _transfer_booking,
    "transfer_cancellation": _transfer_cancellation,
    # Reference data
    "location_search": lambda c, a: c.reference_data.locations.get(**a),
    "airport_city_search": lambda c, a: c.reference_data.locations.get(**a),
    "nearest_airport": lambda c, a: c.reference_data.locations.airports.get(**a),
    "airline_lookup": lambda c, a: c.reference_data.airlines.get(**a),
    "checkin_links": lambda c, a: c.reference_data.urls.checkin_links.get(**a),
    "airport_routes": lambda c, a: c.airport.direct_destinations.get(**a),
    "airline_routes": lambda c, a: c.airline.destinations.get(**a),
    # Analytics
    "most_booked_destinations": lambda c, a: c.travel.analytics.air_traffic.booked.get(**a),
    "most_traveled_destinations": lambda c, a: c.travel.analytics.air_traffic.traveled.get(**a),
    "busiest_travel_period": lambda c, a: c.travel.analytics.air_traffic.busiest_period.get(**a),
    "location_score": lambda c, a: c.location.analytics.category_rated_areas.get(**a),
    # Predictions
    "flight_delay_prediction": lambda c, a: c.travel.predictions.flight_delay.get(**a),
    "trip_purpose_prediction": lambda c, a: c.travel.predictions.trip_purpose.get(**a),
    "airport_on_time_performance": lambda c, a: c.airport.predictions.on_time.get(**a),
    "flight_price_analysis": lambda c, a: c.analytics.itinerary_price_metrics.get(**a),
    # Flight operations
    "flight_status": lambda c, a: c.schedule.flights.get(**a),
    # Additional SDK endpoints
    "flight_offers_search_post": lambda c, a: c.shopping.flight_offers_search.post(a),
    "seatmap_display_by_order": lambda c, a: c.shopping.seatmaps.get(**a),
    "hotel_list_by_hotels": lambda c, a: c.reference_data.locations.hotels.by_hotels.get(**a),
    "location_details": lambda c, a: c.reference_data.location(a.get("locationId")).get(),
    "travel_recommendations": lambda c, a: c.reference_data.recommended_locations.get(**a),
}


def check_catalog_coverage(tools: Iterable[types.Tool], handlers: Mapping[str, Handler]) -> None:
    """
    Verify that catalog names and handler names match one to one.

    Raises:
        CatalogMismatchError: On duplicate catalog names, or names present on
            only one side.
    """
    names = [tool.name for tool in tools]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    missing_handlers = sorted(set(names) - set(handlers))
    unlisted_handlers = sorted(set(handlers) - set(names))

    problems = []
    if duplicates:
        problems.append(f"duplicate tool names: {', '.join(duplicates)}")
    if missing_handlers:
        problems.append(f"tools without a handler: {', '.join(missing_handlers)}")
    if unlisted_handlers:
        problems.append(f"handlers not in the catalog: {', '.join(unlisted_handlers)}")
    if problems:
        raise CatalogMismatchError("; ".join(problems))


def format_error(error: Exception) -> str:
    """Render an operation error as `Error: <message>` plus an optional description line."""
    if isinstance(error, ResponseError):
        message = error.code or type(error).__name__
        description = error.description()
    else:
        message = str(error)
        description = ""
    return f"Error: {message}\n{description or ''}"


def _text_result(text: str, is_error: bool) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


class Dispatcher:
    """Routes a named tool invocation to its single SDK call."""

    def __init__(
        self,
        provider: AmadeusClientProvider,
        handlers: Optional[Mapping[str, Handler]] = None,
    ):
        self._provider = provider
        self._handlers = dict(TOOL_HANDLERS if handlers is None else handlers)

    async def call_tool(self, name: str, arguments: Optional[Arguments]) -> types.CallToolResult:
        """
        Invoke a tool and wrap the outcome as a CallToolResult.

        Operation failures (upstream rejections, network errors, unknown
        names) come back as an error-flagged result. A ConfigurationError
        from the client provider is not caught: no tool can run without
        credentials.
        """
        client = self._provider.get()
        parameters = arguments or {}

        try:
            handler = self._handlers.get(name)
            if handler is None:
                raise UnknownToolError(name)

            log_info(name, f"Calling Amadeus with {len(parameters)} argument(s)")
            # The SDK is blocking; run it off the event loop
            response = await asyncio.to_thread(handler, client, parameters)
            text = json.dumps(getattr(response, "data", None), indent=2)

        except Exception as e:
            log_error(name, type(e).__name__, str(e))
            return _text_result(format_error(e), is_error=True)

        log_info(name, "Completed")
        return _text_result(text, is_error=False)
