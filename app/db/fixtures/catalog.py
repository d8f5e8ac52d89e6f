from app.enums.brand_category import BrandCategory

# Indian-market brands and their current models
BRANDS = [
    # Regular brands
    {"name": "Maruti Suzuki", "category": BrandCategory.regular,
     "models": ["Alto K10", "S-Presso", "Celerio", "Wagon R", "Swift", "Dzire", "Baleno", "Fronx",
                "Brezza", "Ertiga", "XL6", "Jimny", "Grand Vitara", "Invicto"]},
    {"name": "Hyundai", "category": BrandCategory.regular,
     "models": ["Grand i10 Nios", "i20", "Aura", "Exter", "Venue", "Creta", "Alcazar", "Verna",
                "Tucson", "Ioniq 5"]},
    {"name": "Tata Motors", "category": BrandCategory.regular,
     "models": ["Tiago", "Tigor", "Altroz", "Punch", "Nexon", "Harrier", "Safari", "Nexon EV",
                "Tiago EV", "Punch EV", "Tigor EV"]},
    {"name": "Mahindra", "category": BrandCategory.regular,
     "models": ["Thar", "Thar Roxx", "Bolero", "Bolero Neo", "Scorpio Classic", "Scorpio N",
                "XUV 3XO", "XUV700", "XUV400 EV"]},
    {"name": "Toyota", "category": BrandCategory.regular,
     "models": ["Glanza", "Urban Cruiser Taisor", "Urban Cruiser Hyryder", "Innova Crysta",
                "Innova Hycross", "Fortuner", "Fortuner Legender", "Camry"]},
    {"name": "Kia", "category": BrandCategory.regular,
     "models": ["Sonet", "Seltos", "Carens", "Carnival", "EV6"]},
    {"name": "MG Motor", "category": BrandCategory.regular,
     "models": ["Comet EV", "Astor", "Hector", "Hector Plus", "ZS EV", "Gloster", "Windsor EV"]},
    {"name": "Honda", "category": BrandCategory.regular,
     "models": ["Amaze", "City", "City Hybrid", "Elevate"]},
    {"name": "Renault", "category": BrandCategory.regular,
     "models": ["Kwid", "Triber", "Kiger"]},
    {"name": "Nissan", "category": BrandCategory.regular,
     "models": ["Magnite", "X-Trail"]},
    {"name": "Volkswagen", "category": BrandCategory.regular,
     "models": ["Virtus", "Taigun", "Tiguan"]},
    {"name": "Skoda", "category": BrandCategory.regular,
     "models": ["Slavia", "Kushaq", "Kodiaq", "Superb"]},
    {"name": "Citroen", "category": BrandCategory.regular,
     "models": ["C3", "eC3", "C3 Aircross", "C5 Aircross"]},
    {"name": "Jeep", "category": BrandCategory.regular,
     "models": ["Compass", "Meridian", "Wrangler", "Grand Cherokee"]},
    {"name": "Force Motors", "category": BrandCategory.regular,
     "models": ["Gurkha", "Urbania"]},
    # Luxury brands
    {"name": "Mercedes-Benz", "category": BrandCategory.luxury,
     "models": ["A-Class", "C-Class", "E-Class", "S-Class", "GLA", "GLC", "GLE", "GLS", "G-Class",
                "EQB", "EQE", "EQS"]},
    {"name": "BMW", "category": BrandCategory.luxury,
     "models": ["2 Series", "3 Series", "5 Series", "7 Series", "X1", "X3", "X5", "X7", "i4", "iX", "i7"]},
    {"name": "Audi", "category": BrandCategory.luxury,
     "models": ["A4", "A6", "Q3", "Q5", "Q7", "Q8", "Q8 e-tron"]},
    {"name": "Jaguar Land Rover", "category": BrandCategory.luxury,
     "models": ["Range Rover", "Range Rover Sport", "Range Rover Velar", "Range Rover Evoque",
                "Defender", "Discovery Sport", "F-Pace"]},
    {"name": "Volvo", "category": BrandCategory.luxury,
     "models": ["XC40", "XC60", "XC90", "C40 Recharge"]},
    {"name": "Lexus", "category": BrandCategory.luxury,
     "models": ["ES", "NX", "RX", "LX"]},
    {"name": "Porsche", "category": BrandCategory.luxury,
     "models": ["911", "Macan", "Cayenne", "Panamera", "Taycan"]},
    {"name": "Mini", "category": BrandCategory.luxury,
     "models": ["Cooper 3 Door", "Cooper S", "Countryman", "Mini Electric"]},
]

DROPDOWNS = {
    "fuel_type": ["Petrol", "Diesel", "CNG", "Electric", "Hybrid"],
    "transmission": ["Manual", "Automatic", "CVT", "AMT"],
    "ownership": ["1st Owner", "2nd Owner", "3rd Owner", "4th Owner"],
    "registration_state": [
        "AN", "AP", "AR", "AS", "BR", "CH", "CT", "DD", "DL", "DN", "GA", "GJ",
        "HP", "HR", "JH", "JK", "KA", "KL", "LA", "LD", "MH", "ML", "MN", "MP",
        "MZ", "NL", "OD", "PB", "PY", "RJ", "SK", "TN", "TG", "TR", "UP", "UT", "WB",
    ],
}
