"""Surah metadata: number, transliterated name, English name, verse count, revelation place."""
from collections import namedtuple

Surah = namedtuple("Surah", ["id", "name", "english", "verses", "type"])

SURAHS = [
    Surah(1, "Al-Fatihah", "The Opening", 7, "Meccan"),
    Surah(2, "Al-Baqarah", "The Cow", 286, "Medinan"),
    Surah(3, "Ali 'Imran", "Family of Imran", 200, "Medinan"),
    Surah(4, "An-Nisa", "The Women", 176, "Medinan"),
    Surah(5, "Al-Ma'idah", "The Table Spread", 120, "Medinan"),
    Surah(6, "Al-An'am", "The Cattle", 165, "Meccan"),
    Surah(7, "Al-A'raf", "The Heights", 206, "Meccan"),
    Surah(8, "Al-Anfal", "The Spoils of War", 75, "Medinan"),
    Surah(9, "At-Tawbah", "The Repentance", 129, "Medinan"),
    Surah(10, "Yunus", "Jonah", 109, "Meccan"),
    Surah(11, "Hud", "Hud", 123, "Meccan"),
    Surah(12, "Yusuf", "Joseph", 111, "Meccan"),
    Surah(13, "Ar-Ra'd", "The Thunder", 43, "Medinan"),
    Surah(14, "Ibrahim", "Abraham", 52, "Meccan"),
    Surah(15, "Al-Hijr", "The Rocky Tract", 99, "Meccan"),
    Surah(16, "An-Nahl", "The Bee", 128, "Meccan"),
    Surah(17, "Al-Isra", "The Night Journey", 111, "Meccan"),
    Surah(18, "Al-Kahf", "The Cave", 110, "Meccan"),
    Surah(19, "Maryam", "Mary", 98, "Meccan"),
    Surah(20, "Ta-Ha", "Ta-Ha", 135, "Meccan"),
    Surah(21, "Al-Anbiya", "The Prophets", 112, "Meccan"),
    Surah(22, "Al-Hajj", "The Pilgrimage", 78, "Medinan"),
    Surah(23, "Al-Mu'minun", "The Believers", 118, "Meccan"),
    Surah(24, "An-Nur", "The Light", 64, "Medinan"),
    Surah(25, "Al-Furqan", "The Criterion", 77, "Meccan"),
    Surah(26, "Ash-Shu'ara", "The Poets", 227, "Meccan"),
    Surah(27, "An-Naml", "The Ant", 93, "Meccan"),
    Surah(28, "Al-Qasas", "The Stories", 88, "Meccan"),
    Surah(29, "Al-Ankabut", "The Spider", 69, "Meccan"),
    Surah(30, "Ar-Rum", "The Romans", 60, "Meccan"),
    Surah(31, "Luqman", "Luqman", 34, "Meccan"),
    Surah(32, "As-Sajdah", "The Prostration", 30, "Meccan"),
    Surah(33, "Al-Ahzab", "The Combined Forces", 73, "Medinan"),
    Surah(34, "Saba", "Sheba", 54, "Meccan"),
    Surah(35, "Fatir", "The Originator", 45, "Meccan"),
    Surah(36, "Ya-Sin", "Ya Sin", 83, "Meccan"),
    Surah(37, "As-Saffat", "Those who set the Ranks", 182, "Meccan"),
    Surah(38, "Sad", "The Letter Sad", 88, "Meccan"),
    Surah(39, "Az-Zumar", "The Troops", 75, "Meccan"),
    Surah(40, "Ghafir", "The Forgiver", 85, "Meccan"),
    Surah(41, "Fussilat", "Explained in Detail", 54, "Meccan"),
    Surah(42, "Ash-Shura", "The Consultation", 53, "Meccan"),
    Surah(43, "Az-Zukhruf", "The Ornaments of Gold", 89, "Meccan"),
    Surah(44, "Ad-Dukhan", "The Smoke", 59, "Meccan"),
    Surah(45, "Al-Jathiyah", "The Crouching", 37, "Meccan"),
    Surah(46, "Al-Ahqaf", "The Wind-Curved Sandhills", 35, "Meccan"),
    Surah(47, "Muhammad", "Muhammad", 38, "Medinan"),
    Surah(48, "Al-Fath", "The Victory", 29, "Medinan"),
    Surah(49, "Al-Hujurat", "The Rooms", 18, "Medinan"),
    Surah(50, "Qaf", "The Letter Qaf", 45, "Meccan"),
    Surah(51, "Adh-Dhariyat", "The Winnowing Winds", 60, "Meccan"),
    Surah(52, "At-Tur", "The Mount", 49, "Meccan"),
    Surah(53, "An-Najm", "The Star", 62, "Meccan"),
    Surah(54, "Al-Qamar", "The Moon", 55, "Meccan"),
    Surah(55, "Ar-Rahman", "The Beneficent", 78, "Medinan"),
    Surah(56, "Al-Waqi'ah", "The Inevitable", 96, "Meccan"),
    Surah(57, "Al-Hadid", "The Iron", 29, "Medinan"),
    Surah(58, "Al-Mujadila", "The Pleading Woman", 22, "Medinan"),
    Surah(59, "Al-Hashr", "The Exile", 24, "Medinan"),
    Surah(60, "Al-Mumtahanah", "She that is to be examined", 13, "Medinan"),
    Surah(61, "As-Saff", "The Ranks", 14, "Medinan"),
    Surah(62, "Al-Jumu'ah", "The Congregation", 11, "Medinan"),
    Surah(63, "Al-Munafiqun", "The Hypocrites", 11, "Medinan"),
    Surah(64, "At-Taghabun", "The Mutual Disillusion", 18, "Medinan"),
    Surah(65, "At-Talaq", "The Divorce", 12, "Medinan"),
    Surah(66, "At-Tahrim", "The Prohibition", 12, "Medinan"),
    Surah(67, "Al-Mulk", "The Sovereignty", 30, "Meccan"),
    Surah(68, "Al-Qalam", "The Pen", 52, "Meccan"),
    Surah(69, "Al-Haqqah", "The Reality", 52, "Meccan"),
    Surah(70, "Al-Ma'arij", "The Ascending Stairways", 44, "Meccan"),
    Surah(71, "Nuh", "Noah", 28, "Meccan"),
    Surah(72, "Al-Jinn", "The Jinn", 28, "Meccan"),
    Surah(73, "Al-Muzzammil", "The Enshrouded One", 20, "Meccan"),
    Surah(74, "Al-Muddaththir", "The Cloaked One", 56, "Meccan"),
    Surah(75, "Al-Qiyamah", "The Resurrection", 40, "Meccan"),
    Surah(76, "Al-Insan", "The Man", 31, "Medinan"),
    Surah(77, "Al-Mursalat", "Those sent forth", 50, "Meccan"),
    Surah(78, "An-Naba", "The Tidings", 40, "Meccan"),
    Surah(79, "An-Nazi'at", "Those who drag forth", 46, "Meccan"),
    Surah(80, "'Abasa", "He Frowned", 42, "Meccan"),
    Surah(81, "At-Takwir", "The Overthrowing", 29, "Meccan"),
    Surah(82, "Al-Infitar", "The Cleaving", 19, "Meccan"),
    Surah(83, "Al-Mutaffifin", "The Defrauding", 36, "Meccan"),
    Surah(84, "Al-Inshiqaq", "The Sundering", 25, "Meccan"),
    Surah(85, "Al-Buruj", "The Mansions of the Stars", 22, "Meccan"),
    Surah(86, "At-Tariq", "The Nightcomer", 17, "Meccan"),
    Surah(87, "Al-A'la", "The Most High", 19, "Meccan"),
    Surah(88, "Al-Ghashiyah", "The Overwhelming", 26, "Meccan"),
    Surah(89, "Al-Fajr", "The Dawn", 30, "Meccan"),
    Surah(90, "Al-Balad", "The City", 20, "Meccan"),
    Surah(91, "Ash-Shams", "The Sun", 15, "Meccan"),
    Surah(92, "Al-Layl", "The Night", 21, "Meccan"),
    Surah(93, "Ad-Duha", "The Morning Hours", 11, "Meccan"),
    Surah(94, "Ash-Sharh", "The Relief", 8, "Meccan"),
    Surah(95, "At-Tin", "The Fig", 8, "Meccan"),
    Surah(96, "Al-'Alaq", "The Clot", 19, "Meccan"),
    Surah(97, "Al-Qadr", "The Power", 5, "Meccan"),
    Surah(98, "Al-Bayyinah", "The Clear Proof", 8, "Medinan"),
    Surah(99, "Az-Zalzalah", "The Earthquake", 8, "Medinan"),
    Surah(100, "Al-'Adiyat", "The Courser", 11, "Meccan"),
    Surah(101, "Al-Qari'ah", "The Calamity", 11, "Meccan"),
    Surah(102, "At-Takathur", "The Rivalry in World Increase", 8, "Meccan"),
    Surah(103, "Al-'Asr", "The Declining Day", 3, "Meccan"),
    Surah(104, "Al-Humazah", "The Traducer", 9, "Meccan"),
    Surah(105, "Al-Fil", "The Elephant", 5, "Meccan"),
    Surah(106, "Quraysh", "Quraysh", 4, "Meccan"),
    Surah(107, "Al-Ma'un", "The Small Kindnesses", 7, "Meccan"),
    Surah(108, "Al-Kawthar", "The Abundance", 3, "Meccan"),
    Surah(109, "Al-Kafirun", "The Disbelievers", 6, "Meccan"),
    Surah(110, "An-Nasr", "The Divine Support", 3, "Medinan"),
    Surah(111, "Al-Masad", "The Palm Fiber", 5, "Meccan"),
    Surah(112, "Al-Ikhlas", "The Purity", 4, "Meccan"),
    Surah(113, "Al-Falaq", "The Daybreak", 5, "Meccan"),
    Surah(114, "An-Nas", "Mankind", 6, "Meccan"),
]

SURAHS_BY_ID = {surah.id: surah for surah in SURAHS}
