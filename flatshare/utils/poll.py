"""
Typed view over the JSON stored in a poll message.

Stored shape::

    {"options": [{"name": "Pizza", "voters": [1, 4]}, {"name": "Sushi", "voters": []}]}
"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class PollOption:
    name: str
    voters: List[int] = field(default_factory=list)

    def to_dict(self):
        return {"name": self.name, "voters": list(self.voters)}


@dataclass
class Poll:
    options: List[PollOption] = field(default_factory=list)

    @classmethod
    def from_names(cls, names):
        return cls(options=[PollOption(name=str(name)) for name in names])

    @classmethod
    def from_dict(cls, data):
        options = []
        for raw in (data or {}).get("options") or []:
            if isinstance(raw, dict):
                voters = []
                for voter in raw.get("voters") or []:
                    if int(voter) not in voters:
                        voters.append(int(voter))
                options.append(PollOption(name=str(raw.get("name", "")), voters=voters))
            else:
                options.append(PollOption(name=str(raw)))
        return cls(options=options)

    def to_dict(self):
        return {"options": [option.to_dict() for option in self.options]}

    def vote(self, user_id, option_index):
        """
        Record `user_id` on the option at `option_index`, removing any earlier vote
        by the same user first. Raises IndexError for an unknown option.
        """
        if option_index < 0 or option_index >= len(self.options):
            raise IndexError(f"Poll has no option {option_index}")

        for option in self.options:
            option.voters = [voter for voter in option.voters if voter != user_id]
        self.options[option_index].voters.append(user_id)

    def votes_of(self, user_id):
        return [index for index, option in enumerate(self.options) if user_id in option.voters]
