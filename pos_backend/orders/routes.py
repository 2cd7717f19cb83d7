# pos_backend/orders/routes.py
from flask import Blueprint, request, jsonify
from sqlalchemy.exc import SQLAlchemyError
from pos_backend.init_db import db
from pos_backend.logging_config import setup_logging
from pos_backend.orders.views import add_cashier_order, list_cashier_orders, place_order, to_int


orders_bp = Blueprint('orders', __name__)

logger = setup_logging()


def _text(body, status):
    return body, status, {'Content-Type': 'text/plain; charset=utf-8'}


@orders_bp.route('/addpayment', methods=['POST'])
def add_payment():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    try:
        order = add_cashier_order(data)
    except KeyError as e:
        logger.error(f"Payment rejected, missing field {e}")
        return _text("Failed to add order", 500)
    except (ValueError, SQLAlchemyError) as e:
        db.session.rollback()
        logger.error(f"Error adding payment: {e}")
        return _text("Failed to add order", 500)

    logger.info(f"Order {order.order_no} added for customer {order.customer_ph_no}")
    return _text("Order added successfully", 201)


@orders_bp.route('/orders', methods=['GET'])
def get_orders():
    try:
        orders = list_cashier_orders()
    except SQLAlchemyError as e:
        logger.error(f"Error retrieving orders: {e}")
        return _text("Failed to retrieve orders", 500)

    if not orders:
        return _text("No orders found", 404)

    return jsonify([order.to_dict() for order in orders]), 200


@orders_bp.route('/getparticulardata', methods=['POST'])
def get_particular_data():
    data = request.get_json(silent=True)
    phone_number = data.get('phoneNumber') if isinstance(data, dict) else None

    try:
        phone_number = to_int(phone_number)
    except ValueError:
        # Nothing is stored under a missing or non-numeric phone number
        logger.warning(f"Order lookup with unusable phone number: {phone_number!r}")
        return _text("No orders found for this phone number", 404)

    try:
        orders = list_cashier_orders(phone_number)
    except SQLAlchemyError as e:
        logger.error(f"Error retrieving orders for {phone_number}: {e}")
        return _text("Failed to retrieve orders", 500)

    if not orders:
        return _text("No orders found for this phone number", 404)

    return jsonify([order.to_dict() for order in orders]), 200


@orders_bp.route('/api/orders', methods=['POST'])
def create_order():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    try:
        order = place_order(data.get('items'), data.get('total'))
    except (ValueError, SQLAlchemyError) as e:
        db.session.rollback()
        logger.error(f"Error placing order: {e}")
        return jsonify({'message': 'Error placing order'}), 500

    logger.info(f"Order {order.id} placed with {len(order.items)} item(s)")
    return jsonify({'message': 'Order placed successfully!', 'order': order.to_dict()}), 201
