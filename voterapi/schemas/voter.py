from datetime import timezone

from marshmallow import EXCLUDE, Schema, fields, post_load, pre_load, validate

from ..models.voter import ZERO_DATE, VoteRecord, VoterRecord


class RecordSchema(Schema):
    """
    Base for the wire records.
    Incoming keys match field keys case-insensitively, unknown keys are
    dropped and explicit nulls fall back to the model defaults.
    """

    class Meta:
        unknown = EXCLUDE

    @pre_load
    def match_keys(self, data, **kwargs):
        if not isinstance(data, dict):
            return data
        keys = {(f.data_key or name).lower(): (f.data_key or name) for name, f in self.load_fields.items()}
        return {
            keys.get(k.lower(), k) if isinstance(k, str) else k: v
            for k, v in data.items()
        }

    def _drop_nulls(self, data):
        return {k: v for k, v in data.items() if v is not None}


class VoteRecordSchema(RecordSchema):
    poll_id = fields.Int(data_key="PollId", strict=True, allow_none=True, load_default=0, validate=validate.Range(min=0))
    vote_id = fields.Int(data_key="VoteId", strict=True, allow_none=True, load_default=0, validate=validate.Range(min=0))
    vote_date = fields.AwareDateTime(
        data_key="VoteDate",
        default_timezone=timezone.utc,
        allow_none=True,
        load_default=ZERO_DATE,
    )

    @post_load
    def make_vote(self, data, **kwargs):
        return VoteRecord(**self._drop_nulls(data))


class VoterSchema(RecordSchema):
    voter_id = fields.Int(data_key="VoterId", strict=True, allow_none=True, load_default=0, validate=validate.Range(min=0))
    name = fields.Str(data_key="Name", allow_none=True, load_default="")
    email = fields.Str(data_key="Email", allow_none=True, load_default="")
    history = fields.List(
        fields.Nested(VoteRecordSchema, allow_none=True),
        data_key="VoteHistory",
        allow_none=True,
        load_default=list,
    )

    @post_load
    def make_voter(self, data, **kwargs):
        data = self._drop_nulls(data)
        if "history" in data:
            # null entries decode as zero-valued votes
            data["history"] = [v if v is not None else VoteRecord() for v in data["history"]]
        return VoterRecord(**data)
