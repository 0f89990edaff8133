from flask import Blueprint
from classes.repository import Repository
from models.topics import Topic
from models.content import Content
from utils.helpers import success_response, error_response

topic_bp = Blueprint("topic", __name__)


def find_topic(id_or_slug):
    """Look a topic up by numeric id first, then by slug."""
    topic = None
    if id_or_slug.isdigit():
        topic = Repository.find_one(Topic, id=int(id_or_slug))
    return topic or Repository.find_one(Topic, slug=id_or_slug)

# All topics in display order
@topic_bp.route("", methods=["GET"])
def get_topics():
    topics = Repository.find_all(Topic, order_by="order_index")
    return success_response({"topics": [topic.to_dict() for topic in topics]})


@topic_bp.route("/<string:id_or_slug>", methods=["GET"])
def get_topic(id_or_slug):
    topic = find_topic(id_or_slug)
    if not topic:
        return error_response("NOT_FOUND", "Topic not found")

    return success_response({"topic": topic.to_dict()})

# Tutorial content for a topic
@topic_bp.route("/<string:id_or_slug>/content", methods=["GET"])
def get_topic_content(id_or_slug):
    topic = find_topic(id_or_slug)
    if not topic:
        return error_response("NOT_FOUND", "Topic not found")

    content = Repository.find_all(Content, order_by="order_index", topic_id=topic.id)

    return success_response({
        "topic": topic.to_dict(),
        "content": [item.to_dict() for item in content],
    })
