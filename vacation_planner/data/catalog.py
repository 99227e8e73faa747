"""
Static catalog data for the trip planner.

Every table is read-only: mappings are wrapped in MappingProxyType and
list values are tuples, so a request can never mutate shared data.
"""

from types import MappingProxyType
from typing import NamedTuple


class ActivityInfo(NamedTuple):
    name: str
    description: str
    price: float
    rating: float


class HotelInfo(NamedTuple):
    name: str
    category: str
    price_per_night: float
    rating: float
    location: str


DEFAULT_DESTINATION = "Paris, France"

# Theme -> destinations, in preference order
THEME_DESTINATIONS = MappingProxyType({
    "Adventure": (
        "Queenstown, New Zealand",
        "Interlaken, Switzerland",
        "Moab, Utah, USA",
        "Costa Rica",
        "Nepal",
    ),
    "Relaxation": (
        "Bali, Indonesia",
        "Maldives",
        "Santorini, Greece",
        "Tulum, Mexico",
        "Seychelles",
    ),
    "Beach": (
        "Phuket, Thailand",
        "Cancun, Mexico",
        "Bora Bora, French Polynesia",
        "Amalfi Coast, Italy",
        "Gold Coast, Australia",
    ),
    "Nature": (
        "Banff National Park, Canada",
        "Patagonia, Argentina/Chile",
        "Serengeti, Tanzania",
        "Yosemite National Park, USA",
        "Amazon Rainforest, Brazil",
    ),
    "Food & Culture": (
        "Tokyo, Japan",
        "Barcelona, Spain",
        "New Orleans, USA",
        "Bangkok, Thailand",
        "Istanbul, Turkey",
    ),
    "City Exploration": (
        "New York City, USA",
        "London, UK",
        "Paris, France",
        "Singapore",
        "Dubai, UAE",
    ),
    "Historical": (
        "Rome, Italy",
        "Athens, Greece",
        "Cairo, Egypt",
        "Kyoto, Japan",
        "Cusco, Peru",
    ),
})

# Month number (1-12) -> destinations in season
SEASONAL_DESTINATIONS = MappingProxyType({
    1: ("Whistler, Canada", "Phuket, Thailand", "Maldives", "Rio de Janeiro, Brazil", "New Zealand"),
    2: ("Venice, Italy", "New Orleans, USA", "Bali, Indonesia", "Costa Rica", "Patagonia, Argentina/Chile"),
    3: ("Tokyo, Japan", "Amsterdam, Netherlands", "Washington D.C., USA", "Morocco", "Galapagos Islands, Ecuador"),
    4: ("Paris, France", "Kyoto, Japan", "Amsterdam, Netherlands", "Seville, Spain", "Marrakech, Morocco"),
    5: ("Greek Islands", "Barcelona, Spain", "Amalfi Coast, Italy", "Bali, Indonesia", "Machu Picchu, Peru"),
    6: ("Santorini, Greece", "Provence, France", "Banff National Park, Canada", "Iceland", "Serengeti, Tanzania"),
    7: ("Bora Bora, French Polynesia", "Amalfi Coast, Italy", "Maui, Hawaii", "Serengeti, Tanzania", "Iceland"),
    8: ("Bali, Indonesia", "Maldives", "Santorini, Greece", "Dubrovnik, Croatia", "Edinburgh, Scotland"),
    9: ("Santorini, Greece", "Tuscany, Italy", "Bali, Indonesia", "Barcelona, Spain", "Kyoto, Japan"),
    10: ("New England, USA", "Kyoto, Japan", "Marrakech, Morocco", "Galapagos Islands, Ecuador", "South Africa"),
    11: ("New York City, USA", "New Zealand", "Thailand", "Maldives", "Peru"),
    12: ("Aspen, Colorado", "Vienna, Austria", "Rovaniemi, Finland", "Sydney, Australia", "Cape Town, South Africa"),
})

# Human phrasings accepted for each canonical theme
THEME_ALIASES = MappingProxyType({
    "adventure": "Adventure",
    "relaxation": "Relaxation",
    "beach": "Beach",
    "nature": "Nature",
    "food": "Food & Culture",
    "food & culture": "Food & Culture",
    "food and culture": "Food & Culture",
    "city": "City Exploration",
    "city exploration": "City Exploration",
    "historical": "Historical",
})

# Pricing
PEAK_MONTHS = frozenset({6, 7, 8, 12})
DEFAULT_FLIGHT_BASE_PRICE = 1000.0
DEFAULT_HOTEL_BASE_PRICE = 150.0

FLIGHT_BASE_PRICES = MappingProxyType({
    "Paris, France": 800.0,
    "London, UK": 750.0,
    "Tokyo, Japan": 1200.0,
    "New York City, USA": 500.0,
    "Sydney, Australia": 1500.0,
    "Rome, Italy": 850.0,
    "Barcelona, Spain": 780.0,
    "Bali, Indonesia": 1100.0,
    "Cancun, Mexico": 450.0,
    "Dubai, UAE": 950.0,
    "Phuket, Thailand": 900.0,
    "Santorini, Greece": 920.0,
    "Maldives": 1300.0,
    "Costa Rica": 600.0,
    "Queenstown, New Zealand": 1400.0,
})

HOTEL_BASE_PRICES = MappingProxyType({
    "Paris, France": 150.0,
    "London, UK": 180.0,
    "Tokyo, Japan": 120.0,
    "New York City, USA": 200.0,
    "Sydney, Australia": 160.0,
    "Rome, Italy": 140.0,
    "Barcelona, Spain": 130.0,
    "Bali, Indonesia": 80.0,
    "Cancun, Mexico": 110.0,
    "Dubai, UAE": 250.0,
    "Phuket, Thailand": 90.0,
    "Santorini, Greece": 220.0,
    "Maldives": 400.0,
    "Costa Rica": 100.0,
    "Queenstown, New Zealand": 170.0,
})

HOTEL_CATEGORY_FACTORS = MappingProxyType({
    "luxury": 2.0,
    "mid-range": 1.0,
    "budget": 0.6,
})

AIRLINES = (
    "Delta Airlines",
    "United Airlines",
    "American Airlines",
    "British Airways",
    "Lufthansa",
    "Emirates",
    "Singapore Airlines",
)

CARRIER_NAMES = MappingProxyType({
    "AA": "American Airlines",
    "DL": "Delta Airlines",
    "UA": "United Airlines",
    "BA": "British Airways",
    "LH": "Lufthansa",
    "EK": "Emirates",
    "SQ": "Singapore Airlines",
    "AF": "Air France",
    "KL": "KLM",
    "LX": "Swiss International",
})

AIRPORT_CODES = MappingProxyType({
    "Paris, France": "CDG",
    "London, UK": "LHR",
    "Tokyo, Japan": "NRT",
    "New York City, USA": "JFK",
    "Sydney, Australia": "SYD",
    "Rome, Italy": "FCO",
    "Barcelona, Spain": "BCN",
    "Bali, Indonesia": "DPS",
    "Cancun, Mexico": "CUN",
    "Dubai, UAE": "DXB",
    "Phuket, Thailand": "HKT",
    "Santorini, Greece": "JTR",
    "Maldives": "MLE",
    "Costa Rica": "SJO",
    "Queenstown, New Zealand": "ZQN",
})

# Booking.com destination ids
BOOKING_DESTINATION_IDS = MappingProxyType({
    "Paris, France": -1456928,
    "London, UK": -2601889,
    "Tokyo, Japan": -246227,
    "New York City, USA": 20088325,
    "Sydney, Australia": -1603135,
    "Rome, Italy": -126693,
    "Queenstown, New Zealand": -2140479,
})

DESTINATION_HOTELS = MappingProxyType({
    "Paris, France": (
        HotelInfo("Grand Hotel Paris", "Luxury", 350.0, 4.8, "City Center"),
        HotelInfo("Eiffel View Inn", "Mid-range", 180.0, 4.2, "Near Eiffel Tower"),
        HotelInfo("Paris Budget Stay", "Budget", 90.0, 3.5, "15th Arrondissement"),
    ),
    "London, UK": (
        HotelInfo("The Savoy", "Luxury", 400.0, 4.9, "The Strand"),
        HotelInfo("London Bridge Hotel", "Mid-range", 200.0, 4.3, "Near London Bridge"),
        HotelInfo("Budget Inn London", "Budget", 100.0, 3.6, "Kensington"),
    ),
    "Tokyo, Japan": (
        HotelInfo("Tokyo Luxury Palace", "Luxury", 380.0, 4.8, "Ginza"),
        HotelInfo("Shinjuku Central Hotel", "Mid-range", 220.0, 4.4, "Shinjuku"),
        HotelInfo("Tokyo Budget Pod", "Budget", 80.0, 3.7, "Asakusa"),
    ),
    "New York City, USA": (
        HotelInfo("Plaza Hotel", "Luxury", 450.0, 4.7, "Central Park South"),
        HotelInfo("Midtown Comfort Inn", "Mid-range", 250.0, 4.1, "Midtown Manhattan"),
        HotelInfo("NYC Budget Stay", "Budget", 120.0, 3.4, "Queens"),
    ),
    "Sydney, Australia": (
        HotelInfo("Sydney Harbour View", "Luxury", 380.0, 4.8, "Circular Quay"),
        HotelInfo("Bondi Beach Hotel", "Mid-range", 210.0, 4.3, "Bondi"),
        HotelInfo("Sydney Budget Inn", "Budget", 95.0, 3.6, "Surry Hills"),
    ),
    "Rome, Italy": (
        HotelInfo("Roman Luxury Suites", "Luxury", 320.0, 4.7, "Near Colosseum"),
        HotelInfo("Trevi Fountain Inn", "Mid-range", 170.0, 4.2, "City Center"),
        HotelInfo("Roma Budget Rooms", "Budget", 85.0, 3.5, "Termini Area"),
    ),
})

GENERIC_HOTELS = (
    HotelInfo("Luxury Resort", "Luxury", 300.0, 4.5, "City Center"),
    HotelInfo("Comfort Inn", "Mid-range", 150.0, 4.0, "Downtown"),
    HotelInfo("Budget Lodge", "Budget", 80.0, 3.5, "Outskirts"),
)

# Activities: destination -> theme bucket -> activities
DEFAULT_ACTIVITY_THEME = "sightseeing"

GENERIC_ACTIVITIES = MappingProxyType({
    "sightseeing": (
        ActivityInfo("City Tour", "Guided tour of main attractions", 30.0, 4.5),
        ActivityInfo("Museum Visit", "Local history and art museum", 15.0, 4.3),
        ActivityInfo("Historic District Walk", "Self-guided tour of historic area", 0.0, 4.2),
    ),
    "adventure": (
        ActivityInfo("Outdoor Excursion", "Nature adventure outside the city", 45.0, 4.6),
        ActivityInfo("Local Experience", "Unique local activity", 35.0, 4.4),
    ),
    "food": (
        ActivityInfo("Local Cuisine Dinner", "Traditional local food experience", 40.0, 4.5),
        ActivityInfo("Food Tour", "Sample various local specialties", 35.0, 4.7),
    ),
    "relaxation": (
        ActivityInfo("Spa Day", "Relaxing spa treatment", 80.0, 4.8),
        ActivityInfo("Park Visit", "Relaxing time in local park", 0.0, 4.3),
    ),
})

DESTINATION_ACTIVITIES = MappingProxyType({
    "Paris, France": MappingProxyType({
        "sightseeing": (
            ActivityInfo("Eiffel Tower", "Iconic iron tower with panoramic views", 25.0, 4.7),
            ActivityInfo("Louvre Museum", "World's largest art museum & historic monument", 17.0, 4.8),
            ActivityInfo("Notre-Dame Cathedral", "Medieval Catholic cathedral", 0.0, 4.6),
            ActivityInfo("Arc de Triomphe", "Iconic triumphal arch honoring those who fought for France", 13.0, 4.5),
        ),
        "adventure": (
            ActivityInfo("Seine River Cruise", "Boat tour along the Seine River", 15.0, 4.4),
            ActivityInfo("Montmartre Walking Tour", "Explore the artistic neighborhood", 25.0, 4.3),
        ),
        "food": (
            ActivityInfo("Le Jules Verne", "Fine dining with Eiffel Tower views", 150.0, 4.6),
            ActivityInfo("Parisian Bakery Tour", "Sample the best pastries in Paris", 45.0, 4.7),
            ActivityInfo("Wine Tasting Experience", "Sample French wines with a sommelier", 60.0, 4.5),
        ),
    }),
    "London, UK": MappingProxyType({
        "sightseeing": (
            ActivityInfo("Tower of London", "Historic castle on the Thames", 30.0, 4.6),
            ActivityInfo("British Museum", "Museum of human history, art, and culture", 0.0, 4.8),
            ActivityInfo("Buckingham Palace", "The Queen's official London residence", 30.0, 4.5),
            ActivityInfo("London Eye", "Giant Ferris wheel on the South Bank", 27.0, 4.4),
        ),
        "adventure": (
            ActivityInfo("Thames RIB Experience", "High-speed boat ride on the Thames", 45.0, 4.7),
            ActivityInfo("The View from The Shard", "Viewing platform at the top of Western Europe's tallest building", 32.0, 4.5),
        ),
        "food": (
            ActivityInfo("Borough Market Tour", "Food tour of London's oldest food market", 35.0, 4.6),
            ActivityInfo("Afternoon Tea at The Ritz", "Classic British afternoon tea experience", 60.0, 4.8),
            ActivityInfo("Gordon Ramsay Restaurant", "Fine dining at celebrity chef restaurant", 120.0, 4.7),
        ),
    }),
    "Tokyo, Japan": MappingProxyType({
        "sightseeing": (
            ActivityInfo("Tokyo Skytree", "Tallest tower in Japan with observation decks", 20.0, 4.5),
            ActivityInfo("Senso-ji Temple", "Ancient Buddhist temple in Asakusa", 0.0, 4.7),
            ActivityInfo("Meiji Shrine", "Shinto shrine dedicated to Emperor Meiji", 0.0, 4.6),
            ActivityInfo("Tokyo Imperial Palace", "Primary residence of the Emperor of Japan", 0.0, 4.4),
        ),
        "adventure": (
            ActivityInfo("Robot Restaurant Show", "Futuristic cabaret show in Shinjuku", 80.0, 4.2),
            ActivityInfo("Mario Kart City Tour", "Drive through Tokyo dressed as Mario characters", 90.0, 4.8),
        ),
        "food": (
            ActivityInfo("Tsukiji Outer Market Tour", "Food tour of famous fish market area", 40.0, 4.7),
            ActivityInfo("Sushi Making Class", "Learn to make sushi with a master chef", 65.0, 4.8),
            ActivityInfo("Izakaya Hopping in Shinjuku", "Guided tour of traditional Japanese pubs", 70.0, 4.6),
        ),
    }),
})
