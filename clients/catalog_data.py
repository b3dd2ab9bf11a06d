# clients/catalog_data.py
"""
Static catalog served by MockCatalogClient.
Records keep the camelCase shape of the site's JSON payloads; the models'
``from_dict`` constructors turn them into dataclasses.
"""

FLIGHTS = [
    {
        "id": "6E-2045",
        "airline": "IndiGo",
        "flightNumber": "6E-2045",
        "segments": [
            {
                "from": "DEL",
                "to": "BOM",
                "departure": "2024-01-15T09:00:00",
                "arrival": "2024-01-15T11:05:00",
                "duration": 125,
                "cabin": "Economy",
                "flightNumber": "6E-2045",
            },
        ],
        "duration": 125,
        "price": 5499,
        "cabin": "Economy",
        "refundable": True,
        "changeable": True,
        "baggage": {"cabin": "7 kg", "checked": "15 kg"},
        "amenities": ["WiFi", "In-flight entertainment", "Meals included"],
    },
    {
        "id": "UK-911",
        "airline": "Vistara",
        "flightNumber": "UK-911",
        "segments": [
            {
                "from": "DEL",
                "to": "BOM",
                "departure": "2024-01-15T12:20:00",
                "arrival": "2024-01-15T14:35:00",
                "duration": 135,
                "cabin": "Economy",
                "flightNumber": "UK-911",
            },
        ],
        "duration": 135,
        "price": 6299,
        "cabin": "Economy",
        "refundable": True,
        "changeable": True,
        "baggage": {"cabin": "7 kg", "checked": "15 kg"},
        "amenities": ["WiFi", "Priority boarding", "Complimentary meals"],
    },
    {
        "id": "AI-804",
        "airline": "Air India",
        "flightNumber": "AI-804",
        "segments": [
            {
                "from": "BLR",
                "to": "HYD",
                "departure": "2024-01-15T06:30:00",
                "arrival": "2024-01-15T07:45:00",
                "duration": 75,
                "cabin": "Economy",
                "flightNumber": "AI-804",
            },
            {
                "from": "HYD",
                "to": "DEL",
                "departure": "2024-01-15T09:00:00",
                "arrival": "2024-01-15T11:30:00",
                "duration": 150,
                "cabin": "Economy",
                "flightNumber": "AI-805",
            },
        ],
        # total includes the layover
        "duration": 300,
        "price": 4899,
        "cabin": "Economy",
        "refundable": False,
        "changeable": False,
        "baggage": {"cabin": "7 kg", "checked": "20 kg"},
        "amenities": ["Meals included"],
    },
    {
        "id": "SG-8169",
        "airline": "SpiceJet",
        "flightNumber": "SG-8169",
        "segments": [
            {
                "from": "DEL",
                "to": "BOM",
                "departure": "2024-01-15T19:10:00",
                "arrival": "2024-01-15T21:20:00",
                "duration": 130,
                "cabin": "Economy",
                "flightNumber": "SG-8169",
            },
        ],
        "duration": 130,
        "price": 4599,
        "cabin": "Economy",
        "refundable": False,
        "changeable": True,
        "baggage": {"cabin": "7 kg", "checked": "15 kg"},
        "amenities": [],
    },
    {
        "id": "AI-865",
        "airline": "Air India",
        "flightNumber": "AI-865",
        "segments": [
            {
                "from": "DEL",
                "to": "BOM",
                "departure": "2024-01-15T22:45:00",
                "arrival": "2024-01-16T00:55:00",
                "duration": 130,
                "cabin": "Business",
                "flightNumber": "AI-865",
            },
        ],
        "duration": 130,
        "price": 18999,
        "cabin": "Business",
        "refundable": True,
        "changeable": True,
        "baggage": {"cabin": "10 kg", "checked": "35 kg"},
        "amenities": ["Lounge access", "Priority boarding", "Gourmet meals"],
    },
]

HOTELS = [
    {
        "id": "1",
        "name": "The Taj Mahal Palace",
        "city": "Mumbai",
        "location": "Colaba, Mumbai",
        "distance": "2.5 km from center",
        "rating": 4.8,
        "reviewCount": 1234,
        "reviewScore": "Excellent",
        "stars": 5,
        "amenities": ["WiFi", "Pool", "Spa", "Restaurant", "Gym", "Parking", "Bar", "Room Service"],
        "price": 15000,
        "originalPrice": 20000,
        "discount": 25,
        "availableRooms": 5,
        "checkIn": "2:00 PM",
        "checkOut": "11:00 AM",
        "description": "Iconic luxury hotel overlooking the Gateway of India",
    },
    {
        "id": "2",
        "name": "The Oberoi",
        "city": "Mumbai",
        "location": "Nariman Point, Mumbai",
        "distance": "1.2 km from center",
        "rating": 4.9,
        "reviewCount": 892,
        "reviewScore": "Outstanding",
        "stars": 5,
        "amenities": ["WiFi", "Pool", "Spa", "Restaurant", "Gym", "Airport Shuttle"],
        "price": 18000,
        "availableRooms": 3,
        "checkIn": "3:00 PM",
        "checkOut": "12:00 PM",
    },
    {
        "id": "3",
        "name": "Trident BKC",
        "city": "Mumbai",
        "location": "Bandra Kurla Complex",
        "distance": "8 km from center",
        "rating": 4.6,
        "reviewCount": 567,
        "reviewScore": "Very Good",
        "stars": 5,
        "amenities": ["WiFi", "Pool", "Restaurant", "Gym", "Business Center"],
        "price": 12000,
        "originalPrice": 15000,
        "discount": 20,
        "availableRooms": 8,
        "checkIn": "2:00 PM",
        "checkOut": "11:00 AM",
    },
    {
        "id": "4",
        "name": "ITC Maratha",
        "city": "Mumbai",
        "location": "Andheri East, Mumbai",
        "distance": "6 km from airport",
        "rating": 4.7,
        "reviewCount": 743,
        "reviewScore": "Excellent",
        "stars": 5,
        "amenities": ["WiFi", "Pool", "Spa", "Restaurant", "Gym", "Airport Shuttle", "Bar"],
        "price": 10000,
        "availableRooms": 12,
        "checkIn": "2:00 PM",
        "checkOut": "12:00 PM",
    },
    {
        "id": "5",
        "name": "JW Marriott Juhu",
        "city": "Mumbai",
        "location": "Juhu Beach, Mumbai",
        "distance": "15 km from center",
        "rating": 4.8,
        "reviewCount": 1089,
        "reviewScore": "Excellent",
        "stars": 5,
        "amenities": ["WiFi", "Beach Access", "Pool", "Spa", "Restaurant", "Gym", "Bar"],
        "price": 14000,
        "originalPrice": 17500,
        "discount": 20,
        "availableRooms": 6,
        "checkIn": "3:00 PM",
        "checkOut": "11:00 AM",
    },
    {
        "id": "6",
        "name": "Hotel Sea Green",
        "city": "Mumbai",
        "location": "Marine Drive, Mumbai",
        "distance": "0.8 km from center",
        "rating": 4.3,
        "reviewCount": 445,
        "reviewScore": "Good",
        "stars": 3,
        "amenities": ["WiFi", "Restaurant", "Room Service", "Laundry"],
        "pricePerNight": 5000,
        "availableRooms": 15,
        "checkIn": "1:00 PM",
        "checkOut": "11:00 AM",
    },
]

PACKAGES = [
    {
        "id": "1",
        "title": "Goa Beach Escape",
        "destination": "Goa, India",
        "duration": {"days": 5, "nights": 4},
        "price": 35000,
        "rating": 4.9,
        "reviewCount": 234,
        "theme": ["Beach", "Leisure"],
        "inclusions": ["Flights", "Hotels", "Transfers", "Breakfast"],
        "highlights": ["Beach resorts", "Water sports", "Sunset cruise", "Local cuisine"],
        "itinerary": [
            {"day": 1, "title": "Arrival & Beach Relaxation", "desc": "Transfer from Dabolim Airport to your beach resort. Afternoon on the beach, evening at the shacks."},
            {"day": 2, "title": "North Goa Sightseeing", "desc": "Fort Aguada, Chapora Fort and the Calangute, Baga and Anjuna beaches."},
            {"day": 3, "title": "Water Sports & Adventure Day", "desc": "Parasailing, jet skiing and banana boat rides at Calangute Beach."},
            {"day": 4, "title": "South Goa Exploration", "desc": "Palolem and Colva beaches, Cabo de Rama Fort and a spice plantation lunch."},
            {"day": 5, "title": "Departure", "desc": "Breakfast with beach views, then transfer to Dabolim Airport."},
        ],
    },
    {
        "id": "2",
        "title": "Himalayan Adventure",
        "destination": "Manali, Himachal Pradesh",
        "duration": {"days": 6, "nights": 5},
        "price": 28000,
        "rating": 4.8,
        "reviewCount": 189,
        "theme": ["Adventure", "Mountains"],
        "inclusions": ["Accommodation", "Meals", "Transfers", "Activities"],
        "highlights": ["Rohtang Pass", "Solang Valley", "Trekking", "Paragliding"],
        "itinerary": [
            {"day": 1, "title": "Arrival in Manali", "desc": "Transfer to the hotel and an evening walk along Mall Road."},
            {"day": 2, "title": "Manali Local Sightseeing", "desc": "Hadimba Devi Temple, Manu Temple and the Vashisht hot springs."},
            {"day": 3, "title": "Rohtang Pass Adventure", "desc": "Snow activities at Rohtang Pass, subject to weather and permits."},
            {"day": 4, "title": "Solang Valley Activities", "desc": "Paragliding, zorbing and cable car rides in Solang Valley."},
            {"day": 5, "title": "Kullu & Manikaran Excursion", "desc": "Rafting on the Beas and the Manikaran hot springs."},
            {"day": 6, "title": "Departure", "desc": "Transfer to Bhuntar Airport or the Manali bus stand."},
        ],
    },
    {
        "id": "3",
        "title": "Kerala Backwaters",
        "destination": "Kerala, India",
        "duration": {"days": 4, "nights": 3},
        "pricePerPerson": 22000,
        "rating": 4.7,
        "reviewCount": 156,
        "theme": ["Nature", "Wellness"],
        "inclusions": ["Houseboat", "Meals", "Transfers", "Ayurveda Spa"],
        "highlights": ["Houseboat cruise", "Alleppey backwaters", "Ayurvedic massage"],
        "itinerary": [
            {"day": 1, "title": "Arrival in Cochin", "description": "Fort Kochi, the Chinese fishing nets and an evening Kathakali show.", "meals": ["Dinner"]},
            {"day": 2, "title": "Houseboat Check-in & Backwater Cruise", "description": "Cruise the Alleppey backwaters on a private houseboat.", "meals": ["Breakfast", "Lunch", "Dinner"], "accommodation": "Houseboat"},
            {"day": 3, "title": "Alleppey to Kumarakom - Wellness Day", "description": "Ayurvedic spa treatment and the Kumarakom Bird Sanctuary.", "activities": ["Ayurvedic massage", "Bird watching"]},
            {"day": 4, "title": "Departure", "description": "Morning by the backwaters, then transfer to Cochin Airport."},
        ],
    },
    {
        "id": "4",
        "title": "Rajasthan Heritage Tour",
        "destination": "Jaipur, Udaipur, Jodhpur",
        "duration": {"days": 7, "nights": 6},
        "price": 45000,
        "rating": 4.9,
        "reviewCount": 312,
        "theme": ["Heritage", "Culture"],
        "inclusions": ["Flights", "Hotels", "Guide", "Transfers", "Breakfast"],
        "highlights": ["Amber Fort", "City Palace", "Mehrangarh Fort", "Lake Pichola"],
        "itinerary": [
            {"day": 1, "title": "Arrival in Jaipur - The Pink City", "desc": "Hawa Mahal and the Johari and Bapu bazaars."},
            {"day": 2, "title": "Jaipur Sightseeing", "desc": "Amber Fort, City Palace and Jantar Mantar."},
            {"day": 3, "title": "Jaipur to Jodhpur", "desc": "Drive to the Blue City via Pushkar."},
            {"day": 4, "title": "Jodhpur Exploration", "desc": "Mehrangarh Fort, Jaswant Thada and Umaid Bhawan Palace."},
            {"day": 5, "title": "Jodhpur to Udaipur via Ranakpur", "desc": "Ranakpur Jain Temples and a sunset boat ride on Lake Pichola."},
            {"day": 6, "title": "Udaipur - Venice of the East", "desc": "City Palace, Jagdish Temple and Saheliyon ki Bari."},
            {"day": 7, "title": "Departure", "desc": "Transfer to Udaipur Airport."},
        ],
    },
    {
        "id": "5",
        "title": "Andaman Island Paradise",
        "destination": "Port Blair, Havelock",
        "duration": {"days": 5, "nights": 4},
        "price": 42000,
        "rating": 4.8,
        "reviewCount": 198,
        "theme": ["Beach", "Adventure"],
        "inclusions": ["Flights", "Hotels", "Ferry", "Meals", "Activities"],
        "highlights": ["Radhanagar Beach", "Scuba diving", "Cellular Jail"],
        "itinerary": [
            {"day": 1, "title": "Arrival in Port Blair", "desc": "Cellular Jail and the light and sound show."},
            {"day": 2, "title": "Port Blair to Havelock Island", "desc": "Ferry to Havelock and sunset at Radhanagar Beach."},
            {"day": 3, "title": "Havelock - Water Adventures", "desc": "Snorkeling or scuba diving at Elephant Beach."},
            {"day": 4, "title": "Havelock to Neil Island Day Trip", "desc": "Natural Bridge and Bharatpur Beach."},
            {"day": 5, "title": "Departure", "desc": "Ferry back to Port Blair and airport transfer."},
        ],
    },
    {
        "id": "6",
        "title": "Leh Ladakh Expedition",
        "destination": "Leh, Ladakh",
        "duration": {"days": 8, "nights": 7},
        "price": 52000,
        "rating": 5.0,
        "reviewCount": 445,
        "theme": ["Adventure", "Mountains"],
        "inclusions": ["Flights", "Hotels", "Meals", "Permits", "Guide"],
        "highlights": ["Pangong Lake", "Nubra Valley", "Khardung La", "Monasteries"],
        "itinerary": [],
    },
    {
        "id": "7",
        "title": "Shimla Manali Honeymoon",
        "destination": "Shimla, Manali",
        "duration": {"days": 5, "nights": 4},
        "price": 32000,
        "rating": 4.7,
        "reviewCount": 267,
        "theme": ["Honeymoon", "Mountains"],
        "inclusions": ["Hotels", "Candlelight Dinner", "Transfers", "Breakfast"],
        "highlights": ["Mall Road", "Kufri", "Solang Valley"],
        "itinerary": [],
    },
]

VISAS = [
    {
        "id": "1",
        "country": "United States",
        "countryCode": "US",
        "visaType": "Tourist (B-2)",
        "processingTime": "7-10 business days",
        "validity": "10 years (multiple entry)",
        "price": 18500,
        "description": "Tourist visa for leisure, visiting family, or medical treatment",
        "requirements": [
            "Valid passport (6 months validity)",
            "Recent passport-size photograph",
            "Proof of financial stability",
            "Travel itinerary and hotel bookings",
        ],
    },
    {
        "id": "2",
        "country": "United Kingdom",
        "countryCode": "GB",
        "visaType": "Standard Visitor",
        "processingTime": "15 business days",
        "validity": "6 months (single/multiple entry)",
        "price": 14200,
        "description": "For tourism, visiting family and friends, or business purposes",
        "requirements": ["Valid passport", "Bank statements (last 6 months)", "Travel insurance"],
    },
    {
        "id": "3",
        "country": "Schengen Area",
        "countryCode": "EU",
        "visaType": "Tourist Visa",
        "processingTime": "10-15 business days",
        "validity": "90 days (within 180 days)",
        "price": 9500,
        "description": "Valid for 26 European countries in the Schengen zone",
        "requirements": ["Valid passport (3 months beyond stay)", "Travel insurance (30,000 EUR coverage)", "Flight reservations"],
    },
    {
        "id": "4",
        "country": "Australia",
        "countryCode": "AU",
        "visaType": "Visitor Visa (600)",
        "processingTime": "15-20 business days",
        "validity": "12 months (multiple entry)",
        "price": 16800,
        "description": "For tourism or visiting family and friends",
        "requirements": ["Valid passport", "Financial capacity proof", "Health insurance"],
    },
    {
        "id": "5",
        "country": "Canada",
        "countryCode": "CA",
        "visaType": "Temporary Resident Visa",
        "processingTime": "15-20 business days",
        "validity": "10 years (multiple entry)",
        "price": 12500,
        "description": "Visitor visa for tourism, family visits, or business",
        "requirements": ["Valid passport", "Proof of financial support", "Biometrics"],
    },
    {
        "id": "6",
        "country": "Dubai (UAE)",
        "countryCode": "AE",
        "visaType": "Tourist Visa",
        "processingTime": "3-5 business days",
        "validity": "60 days (single entry)",
        "price": 8500,
        "description": "Tourist visa for short-term leisure travel",
        "requirements": ["Valid passport (6 months validity)", "Return flight tickets", "Hotel booking confirmation"],
    },
]
