"""Digital tasbeeh counter with persisted history."""
from datetime import datetime

from .store import TASBEEH_HISTORY_KEY

DHIKRS = [
    {"ar": "سُبْحَانَ ٱللَّٰهِ", "en": "SubhanAllah",
     "ur_meaning": "اللہ پاک ہے", "en_meaning": "Glory be to Allah"},
    {"ar": "ٱلْحَمْدُ لِلَّٰهِ", "en": "Alhamdulillah",
     "ur_meaning": "تمام تعریفیں اللہ کے لیے ہیں", "en_meaning": "Praise be to Allah"},
    {"ar": "ٱللَّٰهُ أَكْبَرُ", "en": "Allahu Akbar",
     "ur_meaning": "اللہ سب سے بڑا ہے", "en_meaning": "Allah is the Greatest"},
    {"ar": "لَا إِلَٰهَ إِلَّا ٱللَّٰهُ", "en": "La ilaha illallah",
     "ur_meaning": "اللہ کے سوا کوئی معبود نہیں", "en_meaning": "There is no god but Allah"},
    {"ar": "أَسْتَغْفِرُ ٱللَّٰهَ", "en": "Astaghfirullah",
     "ur_meaning": "میں اللہ سے معافی مانگتا ہوں", "en_meaning": "I seek forgiveness from Allah"},
]

TARGETS = (33, 100, 1000)
HISTORY_LIMIT = 10


class TasbeehCounter:
    def __init__(self, store, target=TARGETS[0]):
        self.store = store
        self.count = 0
        self.target = target
        self.selected = 0

    @property
    def dhikr(self):
        return DHIKRS[self.selected]

    @property
    def history(self):
        return list(self.store.get(TASBEEH_HISTORY_KEY, []))

    def increment(self):
        self.count += 1
        return self.count

    def progress(self):
        """Fraction of the current round, restarting after each completed target"""
        return (self.count % self.target) / self.target

    def rounds_completed(self):
        return self.count // self.target

    def select(self, index):
        if not 0 <= index < len(DHIKRS):
            raise IndexError(f"no dhikr at index {index}")
        self.selected = index

    def set_target(self, target):
        if target not in TARGETS:
            raise ValueError(f"target must be one of {TARGETS}: {target!r}")
        self.target = target
        self.reset()

    def reset(self, now=None):
        """Close the current session, recording it when anything was counted"""
        if self.count > 0:
            entry = {
                "dhikr": self.dhikr["en"],
                "count": self.count,
                "date": (now or datetime.now()).strftime("%d/%m/%Y, %H:%M:%S"),
            }
            history = [entry] + self.history
            self.store.save(TASBEEH_HISTORY_KEY, history[:HISTORY_LIMIT])
        self.count = 0
