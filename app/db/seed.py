"""Demo marketplace: three users, four neighborhoods, six Nairobi listings."""
import logging

from sqlalchemy.orm import Session

from app.core.security import hash_password
from app.models import Favorite, Message, Neighborhood, Notification, Property, Review, User

logger = logging.getLogger(__name__)

SAMPLE_PASSWORD = "password123"

USERS = [
    dict(username="shakii", email="shakii@example.com", full_name="Cale Shakii", phone="+254712345678",
         role="tenant", bio="Looking for a nice place in Nairobi"),
    dict(username="lebleba", email="leb@example.com", full_name="Leb Leba", phone="+254723456789",
         role="landlord", bio="Property owner in Nairobi"),
    dict(username="sarahk", email="sarah@example.com", full_name="Sarah Kamau", phone="+254734567890",
         role="agent", bio="Real estate agent with 5 years experience"),
]

NEIGHBORHOODS = [
    ("Westlands", "Upscale commercial and residential area in Nairobi"),
    ("Kilimani", "Popular residential area with many apartments"),
    ("Karen", "Affluent suburb with large houses and plots"),
    ("Lavington", "Quiet residential area with good security"),
]

# (owner index, fields)
PROPERTIES = [
    (1, dict(title="Modern 2 Bedroom Apartment", price=45000, property_type="apartment", listing_type="rent",
             bedrooms=2, bathrooms=2, area=85, location="Kilimani, Nairobi", address="Rose Avenue, Kilimani",
             latitude=-1.2921, longitude=36.7892,
             description="Beautiful apartment with modern finishes, located in a secure compound with parking and swimming pool.",
             features=["swimming pool", "security", "parking", "gym", "furnished"])),
    (1, dict(title="Spacious 4 Bedroom Family Home", price=18500000, property_type="house", listing_type="sale",
             bedrooms=4, bathrooms=3, area=250, location="Karen, Nairobi", address="Karen Road, Karen",
             latitude=-1.3224, longitude=36.7064,
             description="Large family home with garden, located in the quiet Karen neighborhood.",
             features=["garden", "security", "parking", "servant quarter", "borehole"])),
    (2, dict(title="Modern Studio Apartment", price=30000, property_type="apartment", listing_type="rent",
             bedrooms=1, bathrooms=1, area=45, location="Westlands, Nairobi", address="Waiyaki Way, Westlands",
             latitude=-1.2662, longitude=36.8063,
             description="Cozy studio apartment close to shopping centers and public transportation.",
             features=["security", "parking", "furnished", "internet"])),
    (2, dict(title="Luxury 3 Bedroom Apartment", price=60000, property_type="apartment", listing_type="rent",
             bedrooms=3, bathrooms=2, area=120, location="Lavington, Nairobi", address="James Gichuru Road, Lavington",
             latitude=-1.2833, longitude=36.7667,
             description="Luxurious apartment with high-end finishes, ample parking and 24-hour security.",
             features=["swimming pool", "security", "parking", "gym", "furnished", "balcony"])),
    (1, dict(title="Modern 4 Bedroom Townhouse", price=22000000, property_type="townhouse", listing_type="sale",
             bedrooms=4, bathrooms=3, area=220, location="Runda, Nairobi", address="Runda Drive, Runda",
             latitude=-1.2194, longitude=36.8062,
             description="Elegant townhouse in a gated community with garden and play area for children.",
             features=["garden", "security", "parking", "servant quarter", "gym"])),
    (2, dict(title="Spacious 2 Bedroom Apartment", price=35000, property_type="apartment", listing_type="rent",
             bedrooms=2, bathrooms=1, area=75, location="Parklands, Nairobi", address="Forest Road, Parklands",
             latitude=-1.2633, longitude=36.8172,
             description="Well-maintained apartment in a family-friendly neighborhood with good amenities.",
             features=["security", "parking", "water storage"])),
]


def seed_sample_data(db: Session) -> bool:
    """Loads the demo data into an empty store. Returns False when users already exist."""
    if db.query(User).first():
        return False

    users = [User(password=hash_password(SAMPLE_PASSWORD), language="en", **u) for u in USERS]
    db.add_all(users)
    db.flush()

    db.add_all(Neighborhood(name=name, city="Nairobi", description=desc) for name, desc in NEIGHBORHOODS)

    props = [Property(owner_id=users[owner].id, **fields) for owner, fields in PROPERTIES]
    db.add_all(props)
    db.flush()

    tenant, landlord, agent = users
    db.add_all([
        Review(property_id=props[0].id, user_id=landlord.id, rating=5,
               comment="Beautiful apartment with amazing views."),
        Review(property_id=props[0].id, user_id=agent.id, rating=4,
               comment="Great property but slightly overpriced."),
        Review(property_id=props[1].id, user_id=tenant.id, rating=5,
               comment="Spacious house with a beautiful garden. Perfect for families."),
        Favorite(user_id=tenant.id, property_id=props[2].id),
        Favorite(user_id=tenant.id, property_id=props[5].id),
        Notification(user_id=tenant.id, type="property_update", title="Price Update",
                     content="A property in your favorites list has updated its price.",
                     link_url=f"/properties/{props[2].id}"),
        Notification(user_id=agent.id, type="system", title="Welcome!",
                     content="Welcome to HomeSeeker! Complete your profile to get started.",
                     link_url="/profile"),
    ])

    thread = [
        (tenant, agent, props[2], "Hello, I'm interested in the studio apartment. Is it still available?"),
        (agent, tenant, props[2], "Yes, it's available. Would you like to schedule a viewing?"),
        (tenant, agent, props[2], "Yes, I would. Are you available this weekend?"),
        (agent, tenant, props[2], "I can do Saturday afternoon. How about 2pm?"),
        (tenant, landlord, props[0], "Hi, I saw your apartment listing and I'm interested. Can I get more details?"),
        (landlord, tenant, props[0], "Hello! Yes, what would you like to know about the apartment?"),
    ]
    for sender, receiver, prop, content in thread:
        db.add(Message(sender_id=sender.id, receiver_id=receiver.id, property_id=prop.id, content=content))
        db.flush()

    db.commit()
    logger.info("Seeded %d users, %d properties", len(users), len(props))
    return True
