"""Raw Unicode case mapping data in three compact forms.

Most characters are grouped in ranges for an alphabet where the upper case form
sits a fixed distance away (pitch 1). Another pattern is an upper case letter
directly followed by its lower case form, also grouped into ranges (pitch 2).

Regenerate with ``scripts/generate_case_tables.py``; only the marked sections
are rewritten.
"""

from __future__ import annotations

# (lower, upper, range length, range pitch)
SYMMETRIC_RANGES: tuple[tuple[int, int, int, int], ...] = (
    # ++Autogenerated -- start of section symmetric-ranges
    (97, 65, 26, 1),
    (224, 192, 23, 1),
    (248, 216, 7, 1),
    (257, 256, 24, 2),
    (314, 313, 8, 2),
    (331, 330, 23, 2),
    (462, 461, 8, 2),
    (479, 478, 9, 2),
    (505, 504, 20, 2),
    (547, 546, 9, 2),
    (583, 582, 5, 2),
    (945, 913, 17, 1),
    (963, 931, 9, 1),
    (985, 984, 12, 2),
    (1072, 1040, 32, 1),
    (1104, 1024, 16, 1),
    (1121, 1120, 17, 2),
    (1163, 1162, 27, 2),
    (1218, 1217, 7, 2),
    (1233, 1232, 48, 2),
    (1377, 1329, 38, 1),
    (4304, 7312, 43, 1),
    (7681, 7680, 75, 2),
    (7841, 7840, 48, 2),
    (7936, 7944, 8, 1),
    (7952, 7960, 6, 1),
    (7968, 7976, 8, 1),
    (7984, 7992, 8, 1),
    (8000, 8008, 6, 1),
    (8032, 8040, 8, 1),
    (8560, 8544, 16, 1),
    (9424, 9398, 26, 1),
    (11312, 11264, 47, 1),
    (11393, 11392, 50, 2),
    (11520, 4256, 38, 1),
    (42561, 42560, 23, 2),
    (42625, 42624, 14, 2),
    (42787, 42786, 7, 2),
    (42803, 42802, 31, 2),
    (42879, 42878, 5, 2),
    (42903, 42902, 10, 2),
    (42933, 42932, 6, 2),
    (65345, 65313, 26, 1),
    (66600, 66560, 40, 1),
    (66776, 66736, 36, 1),
    (68800, 68736, 51, 1),
    (71872, 71840, 32, 1),
    (93792, 93760, 32, 1),
    (125218, 125184, 34, 1),
    # --Autogenerated -- end of section symmetric-ranges
)

# Symmetric (lower, upper) pairs that do not fit into a range.
SYMMETRIC_PAIRS: tuple[tuple[int, int], ...] = (
    # ++Autogenerated -- start of section symmetric-pairs
    (255, 376),
    (307, 306),
    (309, 308),
    (311, 310),
    (378, 377),
    (380, 379),
    (382, 381),
    (384, 579),
    (387, 386),
    (389, 388),
    (392, 391),
    (396, 395),
    (402, 401),
    (405, 502),
    (409, 408),
    (410, 573),
    (414, 544),
    (417, 416),
    (419, 418),
    (421, 420),
    (424, 423),
    (429, 428),
    (432, 431),
    (436, 435),
    (438, 437),
    (441, 440),
    (445, 444),
    (447, 503),
    (454, 452),
    (457, 455),
    (460, 458),
    (477, 398),
    (499, 497),
    (501, 500),
    (572, 571),
    (575, 11390),
    (576, 11391),
    (578, 577),
    (592, 11375),
    (593, 11373),
    (594, 11376),
    (595, 385),
    (596, 390),
    (598, 393),
    (599, 394),
    (601, 399),
    (603, 400),
    (604, 42923),
    (608, 403),
    (609, 42924),
    (611, 404),
    (613, 42893),
    (614, 42922),
    (616, 407),
    (617, 406),
    (618, 42926),
    (619, 11362),
    (620, 42925),
    (623, 412),
    (625, 11374),
    (626, 413),
    (629, 415),
    (637, 11364),
    (640, 422),
    (642, 42949),
    (643, 425),
    (647, 42929),
    (648, 430),
    (649, 580),
    (650, 433),
    (651, 434),
    (652, 581),
    (658, 439),
    (669, 42930),
    (670, 42928),
    (881, 880),
    (883, 882),
    (887, 886),
    (891, 1021),
    (892, 1022),
    (893, 1023),
    (940, 902),
    (941, 904),
    (942, 905),
    (943, 906),
    (972, 908),
    (973, 910),
    (974, 911),
    (983, 975),
    (1010, 1017),
    (1011, 895),
    (1016, 1015),
    (1019, 1018),
    (1231, 1216),
    (4349, 7357),
    (4350, 7358),
    (4351, 7359),
    (7545, 42877),
    (7549, 11363),
    (7566, 42950),
    (8017, 8025),
    (8019, 8027),
    (8021, 8029),
    (8023, 8031),
    (8048, 8122),
    (8049, 8123),
    (8050, 8136),
    (8051, 8137),
    (8052, 8138),
    (8053, 8139),
    (8054, 8154),
    (8055, 8155),
    (8056, 8184),
    (8057, 8185),
    (8058, 8170),
    (8059, 8171),
    (8060, 8186),
    (8061, 8187),
    (8112, 8120),
    (8113, 8121),
    (8144, 8152),
    (8145, 8153),
    (8160, 8168),
    (8161, 8169),
    (8165, 8172),
    (8526, 8498),
    (8580, 8579),
    (11361, 11360),
    (11365, 570),
    (11366, 574),
    (11368, 11367),
    (11370, 11369),
    (11372, 11371),
    (11379, 11378),
    (11382, 11381),
    (11500, 11499),
    (11502, 11501),
    (11507, 11506),
    (11559, 4295),
    (11565, 4301),
    (42874, 42873),
    (42876, 42875),
    (42892, 42891),
    (42897, 42896),
    (42899, 42898),
    (42900, 42948),
    (42947, 42946),
    (42952, 42951),
    (42954, 42953),
    (42998, 42997),
    (43859, 42931),
    # --Autogenerated -- end of section symmetric-pairs
)

# Characters whose conversion needs more than one character, or where folding
# differs from lowering, or where upper(lower(x)) != x or lower(upper(x)) != x.
# (origin, folded, upper, lower); an empty field means no conversion.
COMPLEX_CONVERSIONS: tuple[tuple[bytes, bytes, bytes, bytes], ...] = (
    # ++Autogenerated -- start of section complex
    (b"\xc2\xb5", b"\xce\xbc", b"\xce\x9c", b""),
    (b"\xc3\x9f", b"ss", b"SS", b""),
    (b"\xc4\xb0", b"i\xcc\x87", b"", b"i\xcc\x87"),
    (b"\xc4\xb1", b"", b"I", b""),
    (b"\xc5\x89", b"\xca\xbcn", b"\xca\xbcN", b""),
    (b"\xc5\xbf", b"s", b"S", b""),
    (b"\xc7\x85", b"\xc7\x86", b"\xc7\x84", b"\xc7\x86"),
    (b"\xc7\x88", b"\xc7\x89", b"\xc7\x87", b"\xc7\x89"),
    (b"\xc7\x8b", b"\xc7\x8c", b"\xc7\x8a", b"\xc7\x8c"),
    (b"\xc7\xb0", b"j\xcc\x8c", b"J\xcc\x8c", b""),
    (b"\xc7\xb2", b"\xc7\xb3", b"\xc7\xb1", b"\xc7\xb3"),
    (b"\xcd\x85", b"\xce\xb9", b"\xce\x99", b""),
    (b"\xce\x90", b"\xce\xb9\xcc\x88\xcc\x81", b"\xce\x99\xcc\x88\xcc\x81", b""),
    (b"\xce\xb0", b"\xcf\x85\xcc\x88\xcc\x81", b"\xce\xa5\xcc\x88\xcc\x81", b""),
    (b"\xcf\x82", b"\xcf\x83", b"\xce\xa3", b""),
    (b"\xcf\x90", b"\xce\xb2", b"\xce\x92", b""),
    (b"\xcf\x91", b"\xce\xb8", b"\xce\x98", b""),
    (b"\xcf\x95", b"\xcf\x86", b"\xce\xa6", b""),
    (b"\xcf\x96", b"\xcf\x80", b"\xce\xa0", b""),
    (b"\xcf\xb0", b"\xce\xba", b"\xce\x9a", b""),
    (b"\xcf\xb1", b"\xcf\x81", b"\xce\xa1", b""),
    (b"\xcf\xb4", b"\xce\xb8", b"", b"\xce\xb8"),
    (b"\xcf\xb5", b"\xce\xb5", b"\xce\x95", b""),
    (b"\xd6\x87", b"\xd5\xa5\xd6\x82", b"\xd4\xb5\xd5\x92", b""),
    (b"\xe1\x8e\xa0", b"", b"", b"\xea\xad\xb0"),
    (b"\xe1\x8e\xa1", b"", b"", b"\xea\xad\xb1"),
    (b"\xe1\x8e\xa2", b"", b"", b"\xea\xad\xb2"),
    (b"\xe1\x8e\xa3", b"", b"", b"\xea\xad\xb3"),
    (b"\xe1\x8e\xa4", b"", b"", b"\xea\xad\xb4"),
    (b"\xe1\x8e\xa5", b"", b"", b"\xea\xad\xb5"),
    (b"\xe1\x8e\xa6", b"", b"", b"\xea\xad\xb6"),
    (b"\xe1\x8e\xa7", b"", b"", b"\xea\xad\xb7"),
    (b"\xe1\x8e\xa8", b"", b"", b"\xea\xad\xb8"),
    (b"\xe1\x8e\xa9", b"", b"", b"\xea\xad\xb9"),
    (b"\xe1\x8e\xaa", b"", b"", b"\xea\xad\xba"),
    (b"\xe1\x8e\xab", b"", b"", b"\xea\xad\xbb"),
    (b"\xe1\x8e\xac", b"", b"", b"\xea\xad\xbc"),
    (b"\xe1\x8e\xad", b"", b"", b"\xea\xad\xbd"),
    (b"\xe1\x8e\xae", b"", b"", b"\xea\xad\xbe"),
    (b"\xe1\x8e\xaf", b"", b"", b"\xea\xad\xbf"),
    (b"\xe1\x8e\xb0", b"", b"", b"\xea\xae\x80"),
    (b"\xe1\x8e\xb1", b"", b"", b"\xea\xae\x81"),
    (b"\xe1\x8e\xb2", b"", b"", b"\xea\xae\x82"),
    (b"\xe1\x8e\xb3", b"", b"", b"\xea\xae\x83"),
    (b"\xe1\x8e\xb4", b"", b"", b"\xea\xae\x84"),
    (b"\xe1\x8e\xb5", b"", b"", b"\xea\xae\x85"),
    (b"\xe1\x8e\xb6", b"", b"", b"\xea\xae\x86"),
    (b"\xe1\x8e\xb7", b"", b"", b"\xea\xae\x87"),
    (b"\xe1\x8e\xb8", b"", b"", b"\xea\xae\x88"),
    (b"\xe1\x8e\xb9", b"", b"", b"\xea\xae\x89"),
    (b"\xe1\x8e\xba", b"", b"", b"\xea\xae\x8a"),
    (b"\xe1\x8e\xbb", b"", b"", b"\xea\xae\x8b"),
    (b"\xe1\x8e\xbc", b"", b"", b"\xea\xae\x8c"),
    (b"\xe1\x8e\xbd", b"", b"", b"\xea\xae\x8d"),
    (b"\xe1\x8e\xbe", b"", b"", b"\xea\xae\x8e"),
    (b"\xe1\x8e\xbf", b"", b"", b"\xea\xae\x8f"),
    (b"\xe1\x8f\x80", b"", b"", b"\xea\xae\x90"),
    (b"\xe1\x8f\x81", b"", b"", b"\xea\xae\x91"),
    (b"\xe1\x8f\x82", b"", b"", b"\xea\xae\x92"),
    (b"\xe1\x8f\x83", b"", b"", b"\xea\xae\x93"),
    (b"\xe1\x8f\x84", b"", b"", b"\xea\xae\x94"),
    (b"\xe1\x8f\x85", b"", b"", b"\xea\xae\x95"),
    (b"\xe1\x8f\x86", b"", b"", b"\xea\xae\x96"),
    (b"\xe1\x8f\x87", b"", b"", b"\xea\xae\x97"),
    (b"\xe1\x8f\x88", b"", b"", b"\xea\xae\x98"),
    (b"\xe1\x8f\x89", b"", b"", b"\xea\xae\x99"),
    (b"\xe1\x8f\x8a", b"", b"", b"\xea\xae\x9a"),
    (b"\xe1\x8f\x8b", b"", b"", b"\xea\xae\x9b"),
    (b"\xe1\x8f\x8c", b"", b"", b"\xea\xae\x9c"),
    (b"\xe1\x8f\x8d", b"", b"", b"\xea\xae\x9d"),
    (b"\xe1\x8f\x8e", b"", b"", b"\xea\xae\x9e"),
    (b"\xe1\x8f\x8f", b"", b"", b"\xea\xae\x9f"),
    (b"\xe1\x8f\x90", b"", b"", b"\xea\xae\xa0"),
    (b"\xe1\x8f\x91", b"", b"", b"\xea\xae\xa1"),
    (b"\xe1\x8f\x92", b"", b"", b"\xea\xae\xa2"),
    (b"\xe1\x8f\x93", b"", b"", b"\xea\xae\xa3"),
    (b"\xe1\x8f\x94", b"", b"", b"\xea\xae\xa4"),
    (b"\xe1\x8f\x95", b"", b"", b"\xea\xae\xa5"),
    (b"\xe1\x8f\x96", b"", b"", b"\xea\xae\xa6"),
    (b"\xe1\x8f\x97", b"", b"", b"\xea\xae\xa7"),
    (b"\xe1\x8f\x98", b"", b"", b"\xea\xae\xa8"),
    (b"\xe1\x8f\x99", b"", b"", b"\xea\xae\xa9"),
    (b"\xe1\x8f\x9a", b"", b"", b"\xea\xae\xaa"),
    (b"\xe1\x8f\x9b", b"", b"", b"\xea\xae\xab"),
    (b"\xe1\x8f\x9c", b"", b"", b"\xea\xae\xac"),
    (b"\xe1\x8f\x9d", b"", b"", b"\xea\xae\xad"),
    (b"\xe1\x8f\x9e", b"", b"", b"\xea\xae\xae"),
    (b"\xe1\x8f\x9f", b"", b"", b"\xea\xae\xaf"),
    (b"\xe1\x8f\xa0", b"", b"", b"\xea\xae\xb0"),
    (b"\xe1\x8f\xa1", b"", b"", b"\xea\xae\xb1"),
    (b"\xe1\x8f\xa2", b"", b"", b"\xea\xae\xb2"),
    (b"\xe1\x8f\xa3", b"", b"", b"\xea\xae\xb3"),
    (b"\xe1\x8f\xa4", b"", b"", b"\xea\xae\xb4"),
    (b"\xe1\x8f\xa5", b"", b"", b"\xea\xae\xb5"),
    (b"\xe1\x8f\xa6", b"", b"", b"\xea\xae\xb6"),
    (b"\xe1\x8f\xa7", b"", b"", b"\xea\xae\xb7"),
    (b"\xe1\x8f\xa8", b"", b"", b"\xea\xae\xb8"),
    (b"\xe1\x8f\xa9", b"", b"", b"\xea\xae\xb9"),
    (b"\xe1\x8f\xaa", b"", b"", b"\xea\xae\xba"),
    (b"\xe1\x8f\xab", b"", b"", b"\xea\xae\xbb"),
    (b"\xe1\x8f\xac", b"", b"", b"\xea\xae\xbc"),
    (b"\xe1\x8f\xad", b"", b"", b"\xea\xae\xbd"),
    (b"\xe1\x8f\xae", b"", b"", b"\xea\xae\xbe"),
    (b"\xe1\x8f\xaf", b"", b"", b"\xea\xae\xbf"),
    (b"\xe1\x8f\xb0", b"", b"", b"\xe1\x8f\xb8"),
    (b"\xe1\x8f\xb1", b"", b"", b"\xe1\x8f\xb9"),
    (b"\xe1\x8f\xb2", b"", b"", b"\xe1\x8f\xba"),
    (b"\xe1\x8f\xb3", b"", b"", b"\xe1\x8f\xbb"),
    (b"\xe1\x8f\xb4", b"", b"", b"\xe1\x8f\xbc"),
    (b"\xe1\x8f\xb5", b"", b"", b"\xe1\x8f\xbd"),
    (b"\xe1\x8f\xb8", b"\xe1\x8f\xb0", b"\xe1\x8f\xb0", b""),
    (b"\xe1\x8f\xb9", b"\xe1\x8f\xb1", b"\xe1\x8f\xb1", b""),
    (b"\xe1\x8f\xba", b"\xe1\x8f\xb2", b"\xe1\x8f\xb2", b""),
    (b"\xe1\x8f\xbb", b"\xe1\x8f\xb3", b"\xe1\x8f\xb3", b""),
    (b"\xe1\x8f\xbc", b"\xe1\x8f\xb4", b"\xe1\x8f\xb4", b""),
    (b"\xe1\x8f\xbd", b"\xe1\x8f\xb5", b"\xe1\x8f\xb5", b""),
    (b"\xe1\xb2\x80", b"\xd0\xb2", b"\xd0\x92", b""),
    (b"\xe1\xb2\x81", b"\xd0\xb4", b"\xd0\x94", b""),
    (b"\xe1\xb2\x82", b"\xd0\xbe", b"\xd0\x9e", b""),
    (b"\xe1\xb2\x83", b"\xd1\x81", b"\xd0\xa1", b""),
    (b"\xe1\xb2\x84", b"\xd1\x82", b"\xd0\xa2", b""),
    (b"\xe1\xb2\x85", b"\xd1\x82", b"\xd0\xa2", b""),
    (b"\xe1\xb2\x86", b"\xd1\x8a", b"\xd0\xaa", b""),
    (b"\xe1\xb2\x87", b"\xd1\xa3", b"\xd1\xa2", b""),
    (b"\xe1\xb2\x88", b"\xea\x99\x8b", b"\xea\x99\x8a", b""),
    (b"\xe1\xba\x96", b"h\xcc\xb1", b"H\xcc\xb1", b""),
    (b"\xe1\xba\x97", b"t\xcc\x88", b"T\xcc\x88", b""),
    (b"\xe1\xba\x98", b"w\xcc\x8a", b"W\xcc\x8a", b""),
    (b"\xe1\xba\x99", b"y\xcc\x8a", b"Y\xcc\x8a", b""),
    (b"\xe1\xba\x9a", b"a\xca\xbe", b"A\xca\xbe", b""),
    (b"\xe1\xba\x9b", b"\xe1\xb9\xa1", b"\xe1\xb9\xa0", b""),
    (b"\xe1\xba\x9e", b"ss", b"", b"\xc3\x9f"),
    (b"\xe1\xbd\x90", b"\xcf\x85\xcc\x93", b"\xce\xa5\xcc\x93", b""),
    (b"\xe1\xbd\x92", b"\xcf\x85\xcc\x93\xcc\x80", b"\xce\xa5\xcc\x93\xcc\x80", b""),
    (b"\xe1\xbd\x94", b"\xcf\x85\xcc\x93\xcc\x81", b"\xce\xa5\xcc\x93\xcc\x81", b""),
    (b"\xe1\xbd\x96", b"\xcf\x85\xcc\x93\xcd\x82", b"\xce\xa5\xcc\x93\xcd\x82", b""),
    (b"\xe1\xbe\x80", b"\xe1\xbc\x80\xce\xb9", b"\xe1\xbc\x88\xce\x99", b""),
    (b"\xe1\xbe\x81", b"\xe1\xbc\x81\xce\xb9", b"\xe1\xbc\x89\xce\x99", b""),
    (b"\xe1\xbe\x82", b"\xe1\xbc\x82\xce\xb9", b"\xe1\xbc\x8a\xce\x99", b""),
    (b"\xe1\xbe\x83", b"\xe1\xbc\x83\xce\xb9", b"\xe1\xbc\x8b\xce\x99", b""),
    (b"\xe1\xbe\x84", b"\xe1\xbc\x84\xce\xb9", b"\xe1\xbc\x8c\xce\x99", b""),
    (b"\xe1\xbe\x85", b"\xe1\xbc\x85\xce\xb9", b"\xe1\xbc\x8d\xce\x99", b""),
    (b"\xe1\xbe\x86", b"\xe1\xbc\x86\xce\xb9", b"\xe1\xbc\x8e\xce\x99", b""),
    (b"\xe1\xbe\x87", b"\xe1\xbc\x87\xce\xb9", b"\xe1\xbc\x8f\xce\x99", b""),
    (b"\xe1\xbe\x88", b"\xe1\xbc\x80\xce\xb9", b"\xe1\xbc\x88\xce\x99", b"\xe1\xbe\x80"),
    (b"\xe1\xbe\x89", b"\xe1\xbc\x81\xce\xb9", b"\xe1\xbc\x89\xce\x99", b"\xe1\xbe\x81"),
    (b"\xe1\xbe\x8a", b"\xe1\xbc\x82\xce\xb9", b"\xe1\xbc\x8a\xce\x99", b"\xe1\xbe\x82"),
    (b"\xe1\xbe\x8b", b"\xe1\xbc\x83\xce\xb9", b"\xe1\xbc\x8b\xce\x99", b"\xe1\xbe\x83"),
    (b"\xe1\xbe\x8c", b"\xe1\xbc\x84\xce\xb9", b"\xe1\xbc\x8c\xce\x99", b"\xe1\xbe\x84"),
    (b"\xe1\xbe\x8d", b"\xe1\xbc\x85\xce\xb9", b"\xe1\xbc\x8d\xce\x99", b"\xe1\xbe\x85"),
    (b"\xe1\xbe\x8e", b"\xe1\xbc\x86\xce\xb9", b"\xe1\xbc\x8e\xce\x99", b"\xe1\xbe\x86"),
    (b"\xe1\xbe\x8f", b"\xe1\xbc\x87\xce\xb9", b"\xe1\xbc\x8f\xce\x99", b"\xe1\xbe\x87"),
    (b"\xe1\xbe\x90", b"\xe1\xbc\xa0\xce\xb9", b"\xe1\xbc\xa8\xce\x99", b""),
    (b"\xe1\xbe\x91", b"\xe1\xbc\xa1\xce\xb9", b"\xe1\xbc\xa9\xce\x99", b""),
    (b"\xe1\xbe\x92", b"\xe1\xbc\xa2\xce\xb9", b"\xe1\xbc\xaa\xce\x99", b""),
    (b"\xe1\xbe\x93", b"\xe1\xbc\xa3\xce\xb9", b"\xe1\xbc\xab\xce\x99", b""),
    (b"\xe1\xbe\x94", b"\xe1\xbc\xa4\xce\xb9", b"\xe1\xbc\xac\xce\x99", b""),
    (b"\xe1\xbe\x95", b"\xe1\xbc\xa5\xce\xb9", b"\xe1\xbc\xad\xce\x99", b""),
    (b"\xe1\xbe\x96", b"\xe1\xbc\xa6\xce\xb9", b"\xe1\xbc\xae\xce\x99", b""),
    (b"\xe1\xbe\x97", b"\xe1\xbc\xa7\xce\xb9", b"\xe1\xbc\xaf\xce\x99", b""),
    (b"\xe1\xbe\x98", b"\xe1\xbc\xa0\xce\xb9", b"\xe1\xbc\xa8\xce\x99", b"\xe1\xbe\x90"),
    (b"\xe1\xbe\x99", b"\xe1\xbc\xa1\xce\xb9", b"\xe1\xbc\xa9\xce\x99", b"\xe1\xbe\x91"),
    (b"\xe1\xbe\x9a", b"\xe1\xbc\xa2\xce\xb9", b"\xe1\xbc\xaa\xce\x99", b"\xe1\xbe\x92"),
    (b"\xe1\xbe\x9b", b"\xe1\xbc\xa3\xce\xb9", b"\xe1\xbc\xab\xce\x99", b"\xe1\xbe\x93"),
    (b"\xe1\xbe\x9c", b"\xe1\xbc\xa4\xce\xb9", b"\xe1\xbc\xac\xce\x99", b"\xe1\xbe\x94"),
    (b"\xe1\xbe\x9d", b"\xe1\xbc\xa5\xce\xb9", b"\xe1\xbc\xad\xce\x99", b"\xe1\xbe\x95"),
    (b"\xe1\xbe\x9e", b"\xe1\xbc\xa6\xce\xb9", b"\xe1\xbc\xae\xce\x99", b"\xe1\xbe\x96"),
    (b"\xe1\xbe\x9f", b"\xe1\xbc\xa7\xce\xb9", b"\xe1\xbc\xaf\xce\x99", b"\xe1\xbe\x97"),
    (b"\xe1\xbe\xa0", b"\xe1\xbd\xa0\xce\xb9", b"\xe1\xbd\xa8\xce\x99", b""),
    (b"\xe1\xbe\xa1", b"\xe1\xbd\xa1\xce\xb9", b"\xe1\xbd\xa9\xce\x99", b""),
    (b"\xe1\xbe\xa2", b"\xe1\xbd\xa2\xce\xb9", b"\xe1\xbd\xaa\xce\x99", b""),
    (b"\xe1\xbe\xa3", b"\xe1\xbd\xa3\xce\xb9", b"\xe1\xbd\xab\xce\x99", b""),
    (b"\xe1\xbe\xa4", b"\xe1\xbd\xa4\xce\xb9", b"\xe1\xbd\xac\xce\x99", b""),
    (b"\xe1\xbe\xa5", b"\xe1\xbd\xa5\xce\xb9", b"\xe1\xbd\xad\xce\x99", b""),
    (b"\xe1\xbe\xa6", b"\xe1\xbd\xa6\xce\xb9", b"\xe1\xbd\xae\xce\x99", b""),
    (b"\xe1\xbe\xa7", b"\xe1\xbd\xa7\xce\xb9", b"\xe1\xbd\xaf\xce\x99", b""),
    (b"\xe1\xbe\xa8", b"\xe1\xbd\xa0\xce\xb9", b"\xe1\xbd\xa8\xce\x99", b"\xe1\xbe\xa0"),
    (b"\xe1\xbe\xa9", b"\xe1\xbd\xa1\xce\xb9", b"\xe1\xbd\xa9\xce\x99", b"\xe1\xbe\xa1"),
    (b"\xe1\xbe\xaa", b"\xe1\xbd\xa2\xce\xb9", b"\xe1\xbd\xaa\xce\x99", b"\xe1\xbe\xa2"),
    (b"\xe1\xbe\xab", b"\xe1\xbd\xa3\xce\xb9", b"\xe1\xbd\xab\xce\x99", b"\xe1\xbe\xa3"),
    (b"\xe1\xbe\xac", b"\xe1\xbd\xa4\xce\xb9", b"\xe1\xbd\xac\xce\x99", b"\xe1\xbe\xa4"),
    (b"\xe1\xbe\xad", b"\xe1\xbd\xa5\xce\xb9", b"\xe1\xbd\xad\xce\x99", b"\xe1\xbe\xa5"),
    (b"\xe1\xbe\xae", b"\xe1\xbd\xa6\xce\xb9", b"\xe1\xbd\xae\xce\x99", b"\xe1\xbe\xa6"),
    (b"\xe1\xbe\xaf", b"\xe1\xbd\xa7\xce\xb9", b"\xe1\xbd\xaf\xce\x99", b"\xe1\xbe\xa7"),
    (b"\xe1\xbe\xb2", b"\xe1\xbd\xb0\xce\xb9", b"\xe1\xbe\xba\xce\x99", b""),
    (b"\xe1\xbe\xb3", b"\xce\xb1\xce\xb9", b"\xce\x91\xce\x99", b""),
    (b"\xe1\xbe\xb4", b"\xce\xac\xce\xb9", b"\xce\x86\xce\x99", b""),
    (b"\xe1\xbe\xb6", b"\xce\xb1\xcd\x82", b"\xce\x91\xcd\x82", b""),
    (b"\xe1\xbe\xb7", b"\xce\xb1\xcd\x82\xce\xb9", b"\xce\x91\xcd\x82\xce\x99", b""),
    (b"\xe1\xbe\xbc", b"\xce\xb1\xce\xb9", b"\xce\x91\xce\x99", b"\xe1\xbe\xb3"),
    (b"\xe1\xbe\xbe", b"\xce\xb9", b"\xce\x99", b""),
    (b"\xe1\xbf\x82", b"\xe1\xbd\xb4\xce\xb9", b"\xe1\xbf\x8a\xce\x99", b""),
    (b"\xe1\xbf\x83", b"\xce\xb7\xce\xb9", b"\xce\x97\xce\x99", b""),
    (b"\xe1\xbf\x84", b"\xce\xae\xce\xb9", b"\xce\x89\xce\x99", b""),
    (b"\xe1\xbf\x86", b"\xce\xb7\xcd\x82", b"\xce\x97\xcd\x82", b""),
    (b"\xe1\xbf\x87", b"\xce\xb7\xcd\x82\xce\xb9", b"\xce\x97\xcd\x82\xce\x99", b""),
    (b"\xe1\xbf\x8c", b"\xce\xb7\xce\xb9", b"\xce\x97\xce\x99", b"\xe1\xbf\x83"),
    (b"\xe1\xbf\x92", b"\xce\xb9\xcc\x88\xcc\x80", b"\xce\x99\xcc\x88\xcc\x80", b""),
    (b"\xe1\xbf\x93", b"\xce\xb9\xcc\x88\xcc\x81", b"\xce\x99\xcc\x88\xcc\x81", b""),
    (b"\xe1\xbf\x96", b"\xce\xb9\xcd\x82", b"\xce\x99\xcd\x82", b""),
    (b"\xe1\xbf\x97", b"\xce\xb9\xcc\x88\xcd\x82", b"\xce\x99\xcc\x88\xcd\x82", b""),
    (b"\xe1\xbf\xa2", b"\xcf\x85\xcc\x88\xcc\x80", b"\xce\xa5\xcc\x88\xcc\x80", b""),
    (b"\xe1\xbf\xa3", b"\xcf\x85\xcc\x88\xcc\x81", b"\xce\xa5\xcc\x88\xcc\x81", b""),
    (b"\xe1\xbf\xa4", b"\xcf\x81\xcc\x93", b"\xce\xa1\xcc\x93", b""),
    (b"\xe1\xbf\xa6", b"\xcf\x85\xcd\x82", b"\xce\xa5\xcd\x82", b""),
    (b"\xe1\xbf\xa7", b"\xcf\x85\xcc\x88\xcd\x82", b"\xce\xa5\xcc\x88\xcd\x82", b""),
    (b"\xe1\xbf\xb2", b"\xe1\xbd\xbc\xce\xb9", b"\xe1\xbf\xba\xce\x99", b""),
    (b"\xe1\xbf\xb3", b"\xcf\x89\xce\xb9", b"\xce\xa9\xce\x99", b""),
    (b"\xe1\xbf\xb4", b"\xcf\x8e\xce\xb9", b"\xce\x8f\xce\x99", b""),
    (b"\xe1\xbf\xb6", b"\xcf\x89\xcd\x82", b"\xce\xa9\xcd\x82", b""),
    (b"\xe1\xbf\xb7", b"\xcf\x89\xcd\x82\xce\xb9", b"\xce\xa9\xcd\x82\xce\x99", b""),
    (b"\xe1\xbf\xbc", b"\xcf\x89\xce\xb9", b"\xce\xa9\xce\x99", b"\xe1\xbf\xb3"),
    (b"\xe2\x84\xa6", b"\xcf\x89", b"", b"\xcf\x89"),
    (b"\xe2\x84\xaa", b"k", b"", b"k"),
    (b"\xe2\x84\xab", b"\xc3\xa5", b"", b"\xc3\xa5"),
    (b"\xea\xad\xb0", b"\xe1\x8e\xa0", b"\xe1\x8e\xa0", b""),
    (b"\xea\xad\xb1", b"\xe1\x8e\xa1", b"\xe1\x8e\xa1", b""),
    (b"\xea\xad\xb2", b"\xe1\x8e\xa2", b"\xe1\x8e\xa2", b""),
    (b"\xea\xad\xb3", b"\xe1\x8e\xa3", b"\xe1\x8e\xa3", b""),
    (b"\xea\xad\xb4", b"\xe1\x8e\xa4", b"\xe1\x8e\xa4", b""),
    (b"\xea\xad\xb5", b"\xe1\x8e\xa5", b"\xe1\x8e\xa5", b""),
    (b"\xea\xad\xb6", b"\xe1\x8e\xa6", b"\xe1\x8e\xa6", b""),
    (b"\xea\xad\xb7", b"\xe1\x8e\xa7", b"\xe1\x8e\xa7", b""),
    (b"\xea\xad\xb8", b"\xe1\x8e\xa8", b"\xe1\x8e\xa8", b""),
    (b"\xea\xad\xb9", b"\xe1\x8e\xa9", b"\xe1\x8e\xa9", b""),
    (b"\xea\xad\xba", b"\xe1\x8e\xaa", b"\xe1\x8e\xaa", b""),
    (b"\xea\xad\xbb", b"\xe1\x8e\xab", b"\xe1\x8e\xab", b""),
    (b"\xea\xad\xbc", b"\xe1\x8e\xac", b"\xe1\x8e\xac", b""),
    (b"\xea\xad\xbd", b"\xe1\x8e\xad", b"\xe1\x8e\xad", b""),
    (b"\xea\xad\xbe", b"\xe1\x8e\xae", b"\xe1\x8e\xae", b""),
    (b"\xea\xad\xbf", b"\xe1\x8e\xaf", b"\xe1\x8e\xaf", b""),
    (b"\xea\xae\x80", b"\xe1\x8e\xb0", b"\xe1\x8e\xb0", b""),
    (b"\xea\xae\x81", b"\xe1\x8e\xb1", b"\xe1\x8e\xb1", b""),
    (b"\xea\xae\x82", b"\xe1\x8e\xb2", b"\xe1\x8e\xb2", b""),
    (b"\xea\xae\x83", b"\xe1\x8e\xb3", b"\xe1\x8e\xb3", b""),
    (b"\xea\xae\x84", b"\xe1\x8e\xb4", b"\xe1\x8e\xb4", b""),
    (b"\xea\xae\x85", b"\xe1\x8e\xb5", b"\xe1\x8e\xb5", b""),
    (b"\xea\xae\x86", b"\xe1\x8e\xb6", b"\xe1\x8e\xb6", b""),
    (b"\xea\xae\x87", b"\xe1\x8e\xb7", b"\xe1\x8e\xb7", b""),
    (b"\xea\xae\x88", b"\xe1\x8e\xb8", b"\xe1\x8e\xb8", b""),
    (b"\xea\xae\x89", b"\xe1\x8e\xb9", b"\xe1\x8e\xb9", b""),
    (b"\xea\xae\x8a", b"\xe1\x8e\xba", b"\xe1\x8e\xba", b""),
    (b"\xea\xae\x8b", b"\xe1\x8e\xbb", b"\xe1\x8e\xbb", b""),
    (b"\xea\xae\x8c", b"\xe1\x8e\xbc", b"\xe1\x8e\xbc", b""),
    (b"\xea\xae\x8d", b"\xe1\x8e\xbd", b"\xe1\x8e\xbd", b""),
    (b"\xea\xae\x8e", b"\xe1\x8e\xbe", b"\xe1\x8e\xbe", b""),
    (b"\xea\xae\x8f", b"\xe1\x8e\xbf", b"\xe1\x8e\xbf", b""),
    (b"\xea\xae\x90", b"\xe1\x8f\x80", b"\xe1\x8f\x80", b""),
    (b"\xea\xae\x91", b"\xe1\x8f\x81", b"\xe1\x8f\x81", b""),
    (b"\xea\xae\x92", b"\xe1\x8f\x82", b"\xe1\x8f\x82", b""),
    (b"\xea\xae\x93", b"\xe1\x8f\x83", b"\xe1\x8f\x83", b""),
    (b"\xea\xae\x94", b"\xe1\x8f\x84", b"\xe1\x8f\x84", b""),
    (b"\xea\xae\x95", b"\xe1\x8f\x85", b"\xe1\x8f\x85", b""),
    (b"\xea\xae\x96", b"\xe1\x8f\x86", b"\xe1\x8f\x86", b""),
    (b"\xea\xae\x97", b"\xe1\x8f\x87", b"\xe1\x8f\x87", b""),
    (b"\xea\xae\x98", b"\xe1\x8f\x88", b"\xe1\x8f\x88", b""),
    (b"\xea\xae\x99", b"\xe1\x8f\x89", b"\xe1\x8f\x89", b""),
    (b"\xea\xae\x9a", b"\xe1\x8f\x8a", b"\xe1\x8f\x8a", b""),
    (b"\xea\xae\x9b", b"\xe1\x8f\x8b", b"\xe1\x8f\x8b", b""),
    (b"\xea\xae\x9c", b"\xe1\x8f\x8c", b"\xe1\x8f\x8c", b""),
    (b"\xea\xae\x9d", b"\xe1\x8f\x8d", b"\xe1\x8f\x8d", b""),
    (b"\xea\xae\x9e", b"\xe1\x8f\x8e", b"\xe1\x8f\x8e", b""),
    (b"\xea\xae\x9f", b"\xe1\x8f\x8f", b"\xe1\x8f\x8f", b""),
    (b"\xea\xae\xa0", b"\xe1\x8f\x90", b"\xe1\x8f\x90", b""),
    (b"\xea\xae\xa1", b"\xe1\x8f\x91", b"\xe1\x8f\x91", b""),
    (b"\xea\xae\xa2", b"\xe1\x8f\x92", b"\xe1\x8f\x92", b""),
    (b"\xea\xae\xa3", b"\xe1\x8f\x93", b"\xe1\x8f\x93", b""),
    (b"\xea\xae\xa4", b"\xe1\x8f\x94", b"\xe1\x8f\x94", b""),
    (b"\xea\xae\xa5", b"\xe1\x8f\x95", b"\xe1\x8f\x95", b""),
    (b"\xea\xae\xa6", b"\xe1\x8f\x96", b"\xe1\x8f\x96", b""),
    (b"\xea\xae\xa7", b"\xe1\x8f\x97", b"\xe1\x8f\x97", b""),
    (b"\xea\xae\xa8", b"\xe1\x8f\x98", b"\xe1\x8f\x98", b""),
    (b"\xea\xae\xa9", b"\xe1\x8f\x99", b"\xe1\x8f\x99", b""),
    (b"\xea\xae\xaa", b"\xe1\x8f\x9a", b"\xe1\x8f\x9a", b""),
    (b"\xea\xae\xab", b"\xe1\x8f\x9b", b"\xe1\x8f\x9b", b""),
    (b"\xea\xae\xac", b"\xe1\x8f\x9c", b"\xe1\x8f\x9c", b""),
    (b"\xea\xae\xad", b"\xe1\x8f\x9d", b"\xe1\x8f\x9d", b""),
    (b"\xea\xae\xae", b"\xe1\x8f\x9e", b"\xe1\x8f\x9e", b""),
    (b"\xea\xae\xaf", b"\xe1\x8f\x9f", b"\xe1\x8f\x9f", b""),
    (b"\xea\xae\xb0", b"\xe1\x8f\xa0", b"\xe1\x8f\xa0", b""),
    (b"\xea\xae\xb1", b"\xe1\x8f\xa1", b"\xe1\x8f\xa1", b""),
    (b"\xea\xae\xb2", b"\xe1\x8f\xa2", b"\xe1\x8f\xa2", b""),
    (b"\xea\xae\xb3", b"\xe1\x8f\xa3", b"\xe1\x8f\xa3", b""),
    (b"\xea\xae\xb4", b"\xe1\x8f\xa4", b"\xe1\x8f\xa4", b""),
    (b"\xea\xae\xb5", b"\xe1\x8f\xa5", b"\xe1\x8f\xa5", b""),
    (b"\xea\xae\xb6", b"\xe1\x8f\xa6", b"\xe1\x8f\xa6", b""),
    (b"\xea\xae\xb7", b"\xe1\x8f\xa7", b"\xe1\x8f\xa7", b""),
    (b"\xea\xae\xb8", b"\xe1\x8f\xa8", b"\xe1\x8f\xa8", b""),
    (b"\xea\xae\xb9", b"\xe1\x8f\xa9", b"\xe1\x8f\xa9", b""),
    (b"\xea\xae\xba", b"\xe1\x8f\xaa", b"\xe1\x8f\xaa", b""),
    (b"\xea\xae\xbb", b"\xe1\x8f\xab", b"\xe1\x8f\xab", b""),
    (b"\xea\xae\xbc", b"\xe1\x8f\xac", b"\xe1\x8f\xac", b""),
    (b"\xea\xae\xbd", b"\xe1\x8f\xad", b"\xe1\x8f\xad", b""),
    (b"\xea\xae\xbe", b"\xe1\x8f\xae", b"\xe1\x8f\xae", b""),
    (b"\xea\xae\xbf", b"\xe1\x8f\xaf", b"\xe1\x8f\xaf", b""),
    (b"\xef\xac\x80", b"ff", b"FF", b""),
    (b"\xef\xac\x81", b"fi", b"FI", b""),
    (b"\xef\xac\x82", b"fl", b"FL", b""),
    (b"\xef\xac\x83", b"ffi", b"FFI", b""),
    (b"\xef\xac\x84", b"ffl", b"FFL", b""),
    (b"\xef\xac\x85", b"st", b"ST", b""),
    (b"\xef\xac\x86", b"st", b"ST", b""),
    (b"\xef\xac\x93", b"\xd5\xb4\xd5\xb6", b"\xd5\x84\xd5\x86", b""),
    (b"\xef\xac\x94", b"\xd5\xb4\xd5\xa5", b"\xd5\x84\xd4\xb5", b""),
    (b"\xef\xac\x95", b"\xd5\xb4\xd5\xab", b"\xd5\x84\xd4\xbb", b""),
    (b"\xef\xac\x96", b"\xd5\xbe\xd5\xb6", b"\xd5\x8e\xd5\x86", b""),
    (b"\xef\xac\x97", b"\xd5\xb4\xd5\xad", b"\xd5\x84\xd4\xbd", b""),
    # --Autogenerated -- end of section complex
)
