"""
Фиксированный список объектов района Сатхорн/Силом.
Каталог заполняется им при каждом старте процесса, ID присваиваются по порядку с 1.
"""

SATHORN_PROPERTIES = [
    # Офисы класса A
    {
        "name": "Empire Tower",
        "type": "office",
        "lat": 13.7240,
        "lng": 100.5347,
        "area": 5000,
        "price_per_sqm": 350000,
        "description": "Premium Grade A office tower in the heart of Sathorn business district. Features modern amenities, excellent connectivity to BTS system, and panoramic city views.",
        "address": "1 Empire Tower, South Sathorn Road, Sathorn, Bangkok",
        "nearest_bts": "Chong Nonsi",
        "bts_distance": 200,
        "year_built": 2014,
        "floors": 47,
    },
    {
        "name": "Sathorn Square",
        "type": "office",
        "lat": 13.7219,
        "lng": 100.5339,
        "area": 3200,
        "price_per_sqm": 320000,
        "description": "Modern business complex with state-of-the-art facilities and excellent transport links.",
        "address": "98 Sathorn Square, North Sathorn Road, Sathorn, Bangkok",
        "nearest_bts": "Sala Daeng",
        "bts_distance": 300,
        "year_built": 2016,
        "floors": 35,
    },
    {
        "name": "Ocean Tower",
        "type": "office",
        "lat": 13.7201,
        "lng": 100.5356,
        "area": 4100,
        "price_per_sqm": 385000,
        "description": "Luxury office space with premium finishes and world-class amenities.",
        "address": "75 Ocean Tower, South Sathorn Road, Sathorn, Bangkok",
        "nearest_bts": "Surasak",
        "bts_distance": 150,
        "year_built": 2018,
        "floors": 42,
    },
    {
        "name": "M.R. Kukrit Pramoj Heritage Home",
        "type": "office",
        "lat": 13.7180,
        "lng": 100.5301,
        "area": 2800,
        "price_per_sqm": 295000,
        "description": "Heritage office building with traditional Thai architecture and modern facilities.",
        "address": "19 Soi Phra Pinit, South Sathorn Road, Sathorn, Bangkok",
        "nearest_bts": "Chong Nonsi",
        "bts_distance": 400,
        "year_built": 1995,
        "floors": 25,
    },
    {
        "name": "Silom Complex",
        "type": "office",
        "lat": 13.7250,
        "lng": 100.5370,
        "area": 6500,
        "price_per_sqm": 410000,
        "description": "Large commercial complex with integrated retail and office spaces.",
        "address": "191 Silom Road, Sathorn, Bangkok",
        "nearest_bts": "Sala Daeng",
        "bts_distance": 100,
        "year_built": 2020,
        "floors": 55,
    },

    # Жилые комплексы
    {
        "name": "The Met Condo",
        "type": "residential",
        "lat": 13.7195,
        "lng": 100.5342,
        "area": 200,
        "price_per_sqm": 300000,
        "description": "Luxury condominium with river views and premium amenities including infinity pool and fitness center.",
        "address": "123 The Met, South Sathorn Road, Sathorn, Bangkok",
        "nearest_bts": "Chong Nonsi",
        "bts_distance": 250,
        "year_built": 2017,
        "floors": 40,
    },
    {
        "name": "Sathorn Gardens",
        "type": "residential",
        "lat": 13.7208,
        "lng": 100.5315,
        "area": 180,
        "price_per_sqm": 275000,
        "description": "Garden view apartments with lush landscaping and family-friendly amenities.",
        "address": "45 Sathorn Gardens, North Sathorn Road, Sathorn, Bangkok",
        "nearest_bts": "Sala Daeng",
        "bts_distance": 350,
        "year_built": 2015,
        "floors": 32,
    },
    {
        "name": "The River Condo",
        "type": "residential",
        "lat": 13.7175,
        "lng": 100.5380,
        "area": 350,
        "price_per_sqm": 420000,
        "description": "Riverside luxury living with private balconies overlooking the Chao Phraya River.",
        "address": "88 River View Tower, Charoen Rat Road, Sathorn, Bangkok",
        "nearest_bts": "Saphan Taksin",
        "bts_distance": 180,
        "year_built": 2019,
        "floors": 50,
    },
    {
        "name": "Baan Sathorn",
        "type": "residential",
        "lat": 13.7230,
        "lng": 100.5290,
        "area": 150,
        "price_per_sqm": 260000,
        "description": "Compact urban living with modern design and convenient location.",
        "address": "67 Baan Sathorn, Pan Road, Sathorn, Bangkok",
        "nearest_bts": "Chong Nonsi",
        "bts_distance": 450,
        "year_built": 2014,
        "floors": 28,
    },
    {
        "name": "Noble House",
        "type": "residential",
        "lat": 13.7265,
        "lng": 100.5325,
        "area": 280,
        "price_per_sqm": 380000,
        "description": "Premium residential tower with concierge services and rooftop facilities.",
        "address": "156 Noble House, Silom Road, Sathorn, Bangkok",
        "nearest_bts": "Sala Daeng",
        "bts_distance": 120,
        "year_built": 2021,
        "floors": 45,
    },

    # Рестораны
    {
        "name": "The House on Sathorn",
        "type": "restaurant",
        "lat": 13.7225,
        "lng": 100.5325,
        "area": 320,
        "price_per_sqm": 420000,
        "description": "Fine dining establishment in a beautifully restored heritage building with contemporary cuisine.",
        "address": "106 The House on Sathorn, North Sathorn Road, Sathorn, Bangkok",
        "nearest_bts": "Sala Daeng",
        "bts_distance": 280,
        "year_built": 2008,
        "floors": 2,
    },
    {
        "name": "Blue Elephant",
        "type": "restaurant",
        "lat": 13.7189,
        "lng": 100.5361,
        "area": 280,
        "price_per_sqm": 395000,
        "description": "Royal Thai cuisine in an elegant colonial mansion setting.",
        "address": "233 Blue Elephant, South Sathorn Road, Sathorn, Bangkok",
        "nearest_bts": "Surasak",
        "bts_distance": 200,
        "year_built": 1990,
        "floors": 3,
    },
    {
        "name": "Eat Me Restaurant",
        "type": "restaurant",
        "lat": 13.7155,
        "lng": 100.5341,
        "area": 180,
        "price_per_sqm": 450000,
        "description": "Contemporary dining with innovative fusion cuisine and artistic presentation.",
        "address": "1/6 Eat Me, Soi Pipat 2, Convent Road, Sathorn, Bangkok",
        "nearest_bts": "Sala Daeng",
        "bts_distance": 400,
        "year_built": 2012,
        "floors": 2,
    },
    {
        "name": "Le Du",
        "type": "restaurant",
        "lat": 13.7203,
        "lng": 100.5333,
        "area": 160,
        "price_per_sqm": 475000,
        "description": "Michelin starred restaurant featuring modern Thai cuisine with seasonal ingredients.",
        "address": "399/3 Le Du, Silom 7, Silom Road, Sathorn, Bangkok",
        "nearest_bts": "Sala Daeng",
        "bts_distance": 250,
        "year_built": 2014,
        "floors": 1,
    },
    {
        "name": "Gaggan Anand",
        "type": "restaurant",
        "lat": 13.7241,
        "lng": 100.5351,
        "area": 220,
        "price_per_sqm": 520000,
        "description": "Progressive Indian cuisine by renowned chef Gaggan Anand with innovative molecular gastronomy.",
        "address": "68/1 Gaggan, Soi Langsuan, Ploenchit Road, Sathorn, Bangkok",
        "nearest_bts": "Chit Lom",
        "bts_distance": 300,
        "year_built": 2017,
        "floors": 2,
    },
    {
        "name": "Silom Village Restaurant",
        "type": "restaurant",
        "lat": 13.7253,
        "lng": 100.5231,
        "area": 240,
        "price_per_sqm": 320000,
        "description": "Traditional Thai dining with nightly cultural performances in the Silom Village complex.",
        "address": "286 Silom Village, Silom Road, Bang Rak, Bangkok",
        "nearest_bts": "Surasak",
        "bts_distance": 450,
        "year_built": 1983,
        "floors": 1,
    },
]
