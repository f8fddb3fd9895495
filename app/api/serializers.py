"""ORM rows -> camelCase JSON dicts for the frontend."""
from app.core.dates import isoformat
from app.models import Favorite, Message, Neighborhood, Notification, Property, Review, User
from app.services.conversations import Conversation


def user_out(u: User) -> dict:
    # password and reset token never leave the server
    return {
        "id": u.id,
        "username": u.username,
        "email": u.email,
        "fullName": u.full_name,
        "phone": u.phone,
        "avatar": u.avatar,
        "bio": u.bio,
        "role": u.role,
        "language": u.language or "en",
        "createdAt": isoformat(u.created_at),
    }


def property_out(p: Property) -> dict:
    return {
        "id": p.id,
        "title": p.title,
        "description": p.description,
        "price": p.price,
        "propertyType": p.property_type,
        "listingType": p.listing_type,
        "bedrooms": p.bedrooms,
        "bathrooms": p.bathrooms,
        "area": p.area,
        "location": p.location,
        "address": p.address,
        "latitude": p.latitude,
        "longitude": p.longitude,
        "features": list(p.features),
        "images": list(p.images),
        "ownerId": p.owner_id,
        "verified": bool(p.verified),
        "createdAt": isoformat(p.created_at),
    }


def favorite_out(f: Favorite) -> dict:
    return {
        "id": f.id,
        "userId": f.user_id,
        "propertyId": f.property_id,
        "createdAt": isoformat(f.created_at),
    }


def message_out(m: Message) -> dict:
    return {
        "id": m.id,
        "senderId": m.sender_id,
        "receiverId": m.receiver_id,
        "propertyId": m.property_id,
        "content": m.content,
        "read": bool(m.read),
        "createdAt": isoformat(m.created_at),
    }


def conversation_out(c: Conversation) -> dict:
    return {
        "user": user_out(c.user),
        "lastMessage": message_out(c.last_message),
        "unreadCount": c.unread_count,
    }


def notification_out(n: Notification) -> dict:
    return {
        "id": n.id,
        "userId": n.user_id,
        "type": n.type,
        "title": n.title,
        "content": n.content,
        "read": bool(n.read),
        "linkUrl": n.link_url,
        "createdAt": isoformat(n.created_at),
    }


def review_out(r: Review) -> dict:
    return {
        "id": r.id,
        "propertyId": r.property_id,
        "userId": r.user_id,
        "rating": r.rating,
        "comment": r.comment,
        "createdAt": isoformat(r.created_at),
        "updatedAt": isoformat(r.updated_at),
    }


def neighborhood_out(n: Neighborhood) -> dict:
    return {
        "id": n.id,
        "name": n.name,
        "city": n.city,
        "description": n.description,
        "image": n.image,
        "propertyCount": n.property_count or 0,
    }
