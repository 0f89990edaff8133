import logging
from sqlalchemy.exc import IntegrityError
from models import db
from classes.results import Inserted, ConflictExisting

logger = logging.getLogger(__name__)


class Repository:
    """Thin data-access layer over the SQLAlchemy session.

    Filters are equality filters passed as keyword arguments; ``order_by``
    accepts a column name, prefixed with ``-`` for descending order.
    """

    @staticmethod
    def _ordered(query, model, order_by):
        if not order_by:
            return query
        descending = order_by.startswith("-")
        column = getattr(model, order_by.lstrip("-"))
        return query.order_by(column.desc() if descending else column.asc())

    @staticmethod
    def find_one(model, **filters):
        return model.query.filter_by(**filters).first()

    @staticmethod
    def find_all(model, order_by=None, **filters):
        query = model.query.filter_by(**filters)
        return Repository._ordered(query, model, order_by).all()

    @staticmethod
    def count_where(model, **filters):
        return model.query.filter_by(**filters).count()

    @staticmethod
    def exists(model, **filters):
        return db.session.query(model.query.filter_by(**filters).exists()).scalar()

    @staticmethod
    def insert_one(model, unique_on=None, **values):
        """Insert a row and commit.

        Returns ``Inserted(row)``, or ``ConflictExisting`` when the insert
        violated a uniqueness constraint and a row matching ``unique_on``
        already exists. Any other integrity error is re-raised.
        """
        row = model(**values)
        db.session.add(row)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            constraint = {key: values[key] for key in (unique_on or ())}
            if constraint and Repository.exists(model, **constraint):
                logger.info("Insert into %s conflicted on %s", model.__tablename__, constraint)
                return ConflictExisting(table=model.__tablename__, constraint=constraint)
            raise
        return Inserted(row)
