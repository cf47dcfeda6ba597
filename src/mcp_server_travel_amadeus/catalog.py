"""
Static catalog of the Amadeus tools advertised over MCP.

Each entry carries the tool name, a short description and the JSON schema of
its arguments. The schemas describe what the upstream API accepts; they are
not enforced locally.
"""

from typing import Any, Dict, List, Sequence, Tuple

from mcp import types


def _string(description: str) -> Dict[str, Any]:
    return {"type": "string", "description": description}


def _number(description: str) -> Dict[str, Any]:
    return {"type": "number", "description": description}


def _array(description: str) -> Dict[str, Any]:
    return {"type": "array", "description": description}


def _schema(properties: Dict[str, Any], required: Sequence[str]) -> Dict[str, Any]:
    return {"type": "object", "properties": properties, "required": list(required)}


def _tool(name: str, description: str, properties: Dict[str, Any], required: Sequence[str]) -> types.Tool:
    return types.Tool(name=name, description=description, inputSchema=_schema(properties, required))


def _square() -> Dict[str, Any]:
    return {
        "north": _number("North latitude"),
        "south": _number("South latitude"),
        "east": _number("East longitude"),
        "west": _number("West longitude"),
    }


def _lat_lon() -> Dict[str, Any]:
    return {"latitude": _number("Latitude"), "longitude": _number("Longitude")}


# ============================================================================
# FLIGHT SHOPPING & BOOKING
# ============================================================================

FLIGHT_TOOLS = (
    _tool(
        "flight_offers_search",
        "Search for flight offers between origin and destination on specific dates. "
        "Returns flight options with pricing.",
        {
            "originLocationCode": _string("IATA code of the departure city/airport (e.g., NYC, LON)"),
            "destinationLocationCode": _string("IATA code of the arrival city/airport"),
            "departureDate": _string("Departure date in YYYY-MM-DD format"),
            "returnDate": _string("Return date in YYYY-MM-DD format (optional for one-way)"),
            "adults": _number("Number of adult passengers (default: 1)"),
            "max": _number("Maximum number of flight offers to return (default: 250)"),
        },
        ["originLocationCode", "destinationLocationCode", "departureDate"],
    ),
    _tool(
        "flight_offers_pricing",
        "Confirm pricing and availability for specific flight offers before booking",
        {"flightOffers": _array("Array of flight offers from flight_offers_search")},
        ["flightOffers"],
    ),
    _tool(
        "flight_create_order",
        "Create a flight booking/order for confirmed flight offers",
        {
            "flightOffers": _array("Priced flight offers from flight_offers_pricing"),
            "travelers": _array("Traveler details including name, contact, date of birth, passport info"),
        },
        ["flightOffers", "travelers"],
    ),
    _tool(
        "flight_order_get",
        "Retrieve details of a specific flight order by ID",
        {"flightOrderId": _string("The flight order ID")},
        ["flightOrderId"],
    ),
    _tool(
        "flight_order_delete",
        "Cancel/delete a flight order",
        {"flightOrderId": _string("The flight order ID to cancel")},
        ["flightOrderId"],
    ),
    _tool(
        "flight_inspiration_search",
        "Find cheapest destinations from origin for flexible travel dates",
        {
            "origin": _string("IATA code of origin city/airport"),
            "maxPrice": _number("Maximum price per traveler"),
        },
        ["origin"],
    ),
    _tool(
        "flight_cheapest_date_search",
        "Find cheapest dates to travel between two locations",
        {
            "origin": _string("IATA code of origin"),
            "destination": _string("IATA code of destination"),
        },
        ["origin", "destination"],
    ),
    _tool(
        "flight_availability_search",
        "Search for flight availability with specific constraints (advanced)",
        {
            "originDestinations": _array("Array of origin-destination pairs with dates"),
            "travelers": _array("Traveler types and counts"),
            "sources": _array("Distribution sources (e.g., GDS)"),
        },
        ["originDestinations", "travelers", "sources"],
    ),
    _tool(
        "seatmap_display",
        "Get seat maps for a flight to see available seats",
        {"flightOffers": _array("Flight offers to get seat maps for")},
        ["flightOffers"],
    ),
    _tool(
        "branded_fares_upsell",
        "Get branded fare options with additional services",
        {"flightOffers": _array("Flight offers to get branded fares for")},
        ["flightOffers"],
    ),
    _tool(
        "flight_choice_prediction",
        "Predict which flight offer a traveler is most likely to choose",
        {"flightOffers": _array("Flight offers to predict choice from")},
        ["flightOffers"],
    ),
)


# ============================================================================
# HOTELS
# ============================================================================

HOTEL_TOOLS = (
    _tool(
        "hotel_offers_search",
        "Search for hotel offers in a city or by geographic coordinates",
        {
            "cityCode": _string("IATA city code (e.g., PAR for Paris)"),
            "latitude": _number("Latitude for geographic search"),
            "longitude": _number("Longitude for geographic search"),
            "checkInDate": _string("Check-in date in YYYY-MM-DD format"),
            "checkOutDate": _string("Check-out date in YYYY-MM-DD format"),
            "adults": _number("Number of adult guests"),
            "radius": _number("Search radius in km"),
        },
        [],
    ),
    _tool(
        "hotel_offer_search",
        "Get detailed information about a specific hotel offer",
        {"offerId": _string("Hotel offer ID")},
        ["offerId"],
    ),
    _tool(
        "hotel_booking",
        "Book a hotel room",
        {
            "offerId": _string("Hotel offer ID to book"),
            "guests": _array("Guest information"),
            "payments": _array("Payment information"),
        },
        ["offerId", "guests", "payments"],
    ),
    _tool(
        "hotel_list_by_city",
        "List all hotels in a specific city",
        {"cityCode": _string("IATA city code")},
        ["cityCode"],
    ),
    _tool(
        "hotel_list_by_geocode",
        "List hotels near specific coordinates",
        {**_lat_lon(), "radius": _number("Search radius in km")},
        ["latitude", "longitude"],
    ),
    _tool(
        "hotel_sentiments",
        "Get hotel reviews sentiment analysis",
        {"hotelIds": _string("Comma-separated list of hotel IDs")},
        ["hotelIds"],
    ),
)


# ============================================================================
# POINTS OF INTEREST & ACTIVITIES
# ============================================================================

ACTIVITY_TOOLS = (
    _tool(
        "points_of_interest_search",
        "Search for tourist attractions and points of interest",
        {**_lat_lon(), "radius": _number("Search radius in km (default: 1)")},
        ["latitude", "longitude"],
    ),
    _tool(
        "points_of_interest_by_square",
        "Get points of interest in a geographic square area",
        _square(),
        ["north", "south", "east", "west"],
    ),
    _tool(
        "point_of_interest_details",
        "Get detailed information about a specific point of interest",
        {"poiId": _string("Point of interest ID")},
        ["poiId"],
    ),
    _tool(
        "activities_search",
        "Search for tours and activities by location",
        {**_lat_lon(), "radius": _number("Search radius in km")},
        ["latitude", "longitude"],
    ),
    _tool(
        "activities_by_square",
        "Get activities in a geographic square area",
        _square(),
        ["north", "south", "east", "west"],
    ),
    _tool(
        "activity_details",
        "Get detailed information about a specific activity",
        {"activityId": _string("Activity ID")},
        ["activityId"],
    ),
)


# ============================================================================
# TRANSFERS
# ============================================================================

TRANSFER_TOOLS = (
    _tool(
        "transfer_search",
        "Search for private transfer options between locations",
        {
            "startLocationCode": _string("IATA code of pickup location"),
            "endLocationCode": _string("IATA code of dropoff location"),
            "startDateTime": _string("Pickup datetime in ISO format"),
            "passengers": _number("Number of passengers"),
        },
        ["startLocationCode", "endLocationCode", "startDateTime"],
    ),
    _tool(
        "transfer_booking",
        "Book a transfer service",
        {
            "offerId": _string("Transfer offer ID"),
            "passengers": _array("Passenger details"),
        },
        ["offerId", "passengers"],
    ),
    _tool(
        "transfer_cancellation",
        "Cancel a transfer booking",
        {"transferOrderId": _string("Transfer order ID to cancel")},
        ["transferOrderId"],
    ),
)


# ============================================================================
# REFERENCE DATA
# ============================================================================

REFERENCE_DATA_TOOLS = (
    _tool(
        "location_search",
        "Search for airports and cities with autocomplete (useful for finding IATA codes)",
        {
            "keyword": _string("City or airport name to search for"),
            "subType": _string("Filter by type: AIRPORT, CITY"),
        },
        ["keyword"],
    ),
    _tool(
        "airport_city_search",
        "Search specifically for airports and cities",
        {"keyword": _string("Search keyword")},
        ["keyword"],
    ),
    _tool(
        "nearest_airport",
        "Find nearest airport to given coordinates",
        _lat_lon(),
        ["latitude", "longitude"],
    ),
    _tool(
        "airline_lookup",
        "Look up airline information by IATA or ICAO code",
        {"airlineCodes": _string("Comma-separated airline codes")},
        ["airlineCodes"],
    ),
    _tool(
        "checkin_links",
        "Get airline check-in URLs",
        {"airlineCode": _string("IATA airline code")},
        ["airlineCode"],
    ),
    _tool(
        "airport_routes",
        "Get direct routes from an airport",
        {"departureAirportCode": _string("IATA airport code")},
        ["departureAirportCode"],
    ),
    _tool(
        "airline_routes",
        "Get destinations served by an airline",
        {"airlineCode": _string("IATA airline code")},
        ["airlineCode"],
    ),
)


# ============================================================================
# TRAVEL ANALYTICS
# ============================================================================

ANALYTICS_TOOLS = (
    _tool(
        "most_booked_destinations",
        "Get most booked flight destinations from an origin",
        {
            "originCityCode": _string("IATA origin city code"),
            "period": _string("Time period (YYYY-MM format)"),
        },
        ["originCityCode", "period"],
    ),
    _tool(
        "most_traveled_destinations",
        "Get most traveled destinations from an origin",
        {
            "originCityCode": _string("IATA origin city code"),
            "period": _string("Time period (YYYY-MM format)"),
        },
        ["originCityCode", "period"],
    ),
    _tool(
        "busiest_travel_period",
        "Find the busiest travel period for a route",
        {
            "cityCode": _string("IATA city code"),
            "period": _string("Year (YYYY)"),
        },
        ["cityCode", "period"],
    ),
    _tool(
        "location_score",
        "Get safety and tourism scores for a location",
        _lat_lon(),
        ["latitude", "longitude"],
    ),
)


# ============================================================================
# PREDICTIONS
# ============================================================================

PREDICTION_TOOLS = (
    _tool(
        "flight_delay_prediction",
        "Predict likelihood of flight delay",
        {
            "originLocationCode": _string("IATA origin code"),
            "destinationLocationCode": _string("IATA destination code"),
            "departureDate": _string("Departure date"),
            "departureTime": _string("Departure time"),
            "arrivalDate": _string("Arrival date"),
            "arrivalTime": _string("Arrival time"),
            "aircraftCode": _string("Aircraft code"),
            "carrierCode": _string("Airline code"),
            "flightNumber": _string("Flight number"),
        },
        [
            "originLocationCode",
            "destinationLocationCode",
            "departureDate",
            "departureTime",
            "arrivalDate",
            "arrivalTime",
            "aircraftCode",
            "carrierCode",
            "flightNumber",
        ],
    ),
    _tool(
        "trip_purpose_prediction",
        "Predict if a trip is for business or leisure",
        {
            "originLocationCode": _string("IATA origin code"),
            "destinationLocationCode": _string("IATA destination code"),
            "departureDate": _string("Departure date"),
            "returnDate": _string("Return date"),
        },
        ["originLocationCode", "destinationLocationCode", "departureDate", "returnDate"],
    ),
    _tool(
        "airport_on_time_performance",
        "Get on-time performance predictions for an airport",
        {
            "airportCode": _string("IATA airport code"),
            "date": _string("Date in YYYY-MM-DD format"),
        },
        ["airportCode", "date"],
    ),
    _tool(
        "flight_price_analysis",
        "Analyze flight price metrics and get quartile price distributions",
        {
            "originIataCode": _string("IATA origin code"),
            "destinationIataCode": _string("IATA destination code"),
            "departureDate": _string("Departure date"),
        },
        ["originIataCode", "destinationIataCode", "departureDate"],
    ),
)


# ============================================================================
# FLIGHT OPERATIONS
# ============================================================================

OPERATIONS_TOOLS = (
    _tool(
        "flight_status",
        "Get real-time flight status",
        {
            "carrierCode": _string("Airline IATA code"),
            "flightNumber": _string("Flight number"),
            "scheduledDepartureDate": _string("Scheduled departure date (YYYY-MM-DD)"),
        },
        ["carrierCode", "flightNumber", "scheduledDepartureDate"],
    ),
)


# ============================================================================
# ADDITIONAL SDK ENDPOINTS
# ============================================================================

EXTRA_TOOLS = (
    _tool(
        "flight_offers_search_post",
        "Search for flight offers with a full request body (multi-city, cabin and "
        "connection restrictions)",
        {
            "currencyCode": _string("Currency for prices (3-letter code)"),
            "originDestinations": _array("Array of origin-destination pairs with dates"),
            "travelers": _array("Traveler types and counts"),
            "sources": _array("Distribution sources (e.g., GDS)"),
            "searchCriteria": {"type": "object", "description": "Additional search criteria"},
        },
        ["originDestinations", "travelers", "sources"],
    ),
    _tool(
        "seatmap_display_by_order",
        "Get seat maps for the flights of an existing flight order",
        {"flightOrderId": _string("The flight order ID")},
        ["flightOrderId"],
    ),
    _tool(
        "hotel_list_by_hotels",
        "List hotels by their Amadeus hotel IDs",
        {"hotelIds": _string("Comma-separated list of hotel IDs")},
        ["hotelIds"],
    ),
    _tool(
        "location_details",
        "Get details of an airport or city by its Amadeus location ID",
        {"locationId": _string("Amadeus location ID (e.g., CMUC)")},
        ["locationId"],
    ),
    _tool(
        "travel_recommendations",
        "Get recommended destinations similar to the given cities",
        {
            "cityCodes": _string("Comma-separated IATA city codes"),
            "travelerCountryCode": _string("ISO country code of the traveler"),
        },
        ["cityCodes"],
    ),
)


TOOLS: Tuple[types.Tool, ...] = (
    FLIGHT_TOOLS
    + HOTEL_TOOLS
    + ACTIVITY_TOOLS
    + TRANSFER_TOOLS
    + REFERENCE_DATA_TOOLS
    + ANALYTICS_TOOLS
    + PREDICTION_TOOLS
    + OPERATIONS_TOOLS
    + EXTRA_TOOLS
)


def list_tools() -> List[types.Tool]:
    """Return every tool descriptor, in declaration order."""
    return list(TOOLS)


def tool_names() -> List[str]:
    return [tool.name for tool in TOOLS]
