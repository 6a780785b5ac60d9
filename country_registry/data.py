"""Literal ISO 3166-1 country rows.

Each row is ``(value, alpha2, alpha3, long_name, aliases)``. The three digit
``code`` string is derived from ``value`` when the table is built. Row order is
the canonical registration order: it is the order returned by
``CountryTable.all()`` and it breaks ties when two records share an alias.

Aliases are informal names, not part of the standard. They are matched after
normalization (case-folded, whitespace and underscores removed), so
``"United States"`` also matches ``"unitedstates"`` and ``"united_states"``.

No alias may equal another record's long name. American Samoa therefore
carries no ``"Samoa"`` alias, since that is the long name of ``WS``.
"""
from typing import Tuple

CountryRow = Tuple[int, str, str, str, Tuple[str, ...]]

COUNTRY_ROWS: Tuple[CountryRow, ...] = (
    (4, "AF", "AFG", "Afghanistan", ()),
    (248, "AX", "ALA", "Aland Islands", ()),
    (8, "AL", "ALB", "Albania", ()),
    (12, "DZ", "DZA", "Algeria", ()),
    (16, "AS", "ASM", "American Samoa", ()),
    (20, "AD", "AND", "Andorra", ()),
    (24, "AO", "AGO", "Angola", ()),
    (660, "AI", "AIA", "Anguilla", ()),
    (10, "AQ", "ATA", "Antarctica", ()),
    (28, "AG", "ATG", "Antigua And Barbuda", ()),
    (32, "AR", "ARG", "Argentina", ()),
    (51, "AM", "ARM", "Armenia", ()),
    (533, "AW", "ABW", "Aruba", ()),
    (654, "SH", "SHN", "Ascension And Tristan Da Cunha Saint Helena", ("St Helena", "Saint Helena")),
    (36, "AU", "AUS", "Australia", ()),
    (40, "AT", "AUT", "Austria", ()),
    (31, "AZ", "AZE", "Azerbaijan", ()),
    (48, "BH", "BHR", "Bahrain", ()),
    (50, "BD", "BGD", "Bangladesh", ()),
    (52, "BB", "BRB", "Barbados", ()),
    (112, "BY", "BLR", "Belarus", ()),
    (56, "BE", "BEL", "Belgium", ()),
    (84, "BZ", "BLZ", "Belize", ()),
    (204, "BJ", "BEN", "Benin", ()),
    (60, "BM", "BMU", "Bermuda", ()),
    (64, "BT", "BTN", "Bhutan", ()),
    (862, "VE", "VEN", "Bolivarian Republic Of Venezuela", ("Venezuela",)),
    (68, "BO", "BOL", "Bolivia", ()),
    (535, "BQ", "BES", "Bonaire", ()),
    (70, "BA", "BIH", "Bosnia And Herzegovina", ("Bosnia", "Herzegovina")),
    (72, "BW", "BWA", "Botswana", ()),
    (74, "BV", "BVT", "Bouvet Island", ()),
    (76, "BR", "BRA", "Brazil", ()),
    (86, "IO", "IOT", "British Indian Ocean Territory", ()),
    (92, "VG", "VGB", "British Virgin Islands", ()),
    (96, "BN", "BRN", "Brunei Darussalam", ("Brunei",)),
    (100, "BG", "BGR", "Bulgaria", ()),
    (854, "BF", "BFA", "Burkina Faso", ("Burkina",)),
    (108, "BI", "BDI", "Burundi", ()),
    (132, "CV", "CPV", "Cabo Verde", ("Cape Verde",)),
    (116, "KH", "KHM", "Cambodia", ()),
    (120, "CM", "CMR", "Cameroon", ()),
    (124, "CA", "CAN", "Canada", ()),
    (148, "TD", "TCD", "Chad", ()),
    (152, "CL", "CHL", "Chile", ()),
    (156, "CN", "CHN", "China", ()),
    (162, "CX", "CXR", "Christmas Island", ()),
    (170, "CO", "COL", "Colombia", ()),
    (188, "CR", "CRI", "Costa Rica", ()),
    (384, "CI", "CIV", "Coted Ivoire", ("Ivory Coast",)),
    (191, "HR", "HRV", "Croatia", ()),
    (192, "CU", "CUB", "Cuba", ()),
    (531, "CW", "CUW", "Curacao", ()),
    (196, "CY", "CYP", "Cyprus", ()),
    (203, "CZ", "CZE", "Czechia", ("Czech Republic",)),
    (208, "DK", "DNK", "Denmark", ()),
    (262, "DJ", "DJI", "Djibouti", ()),
    (212, "DM", "DMA", "Dominica", ()),
    (534, "SX", "SXM", "Dutch Part Sint Maarten", ("St Maarten", "Saint Maarten")),
    (218, "EC", "ECU", "Ecuador", ()),
    (818, "EG", "EGY", "Egypt", ()),
    (222, "SV", "SLV", "El Salvador", ()),
    (226, "GQ", "GNQ", "Equatorial Guinea", ()),
    (232, "ER", "ERI", "Eritrea", ()),
    (233, "EE", "EST", "Estonia", ()),
    (748, "SZ", "SWZ", "Eswatini", ("Swaziland",)),
    (231, "ET", "ETH", "Ethiopia", ()),
    (583, "FM", "FSM", "Federated States Of Micronesia", ("Micronesia",)),
    (242, "FJ", "FJI", "Fiji", ()),
    (246, "FI", "FIN", "Finland", ()),
    (250, "FR", "FRA", "France", ()),
    (254, "GF", "GUF", "French Guiana", ()),
    (663, "MF", "MAF", "French Part Saint Martin", ("St Martin", "Saint Martin")),
    (258, "PF", "PYF", "French Polynesia", ()),
    (266, "GA", "GAB", "Gabon", ()),
    (268, "GE", "GEO", "Georgia", ()),
    (276, "DE", "DEU", "Germany", ()),
    (288, "GH", "GHA", "Ghana", ()),
    (292, "GI", "GIB", "Gibraltar", ()),
    (300, "GR", "GRC", "Greece", ()),
    (304, "GL", "GRL", "Greenland", ()),
    (308, "GD", "GRD", "Grenada", ()),
    (312, "GP", "GLP", "Guadeloupe", ()),
    (316, "GU", "GUM", "Guam", ()),
    (320, "GT", "GTM", "Guatemala", ()),
    (831, "GG", "GGY", "Guernsey", ()),
    (324, "GN", "GIN", "Guinea", ()),
    (624, "GW", "GNB", "Guinea Bissau", ()),
    (328, "GY", "GUY", "Guyana", ()),
    (332, "HT", "HTI", "Haiti", ()),
    (334, "HM", "HMD", "Heard Island And Mc Donald Islands", ("Heard Island", "Mc Donald Islands")),
    (340, "HN", "HND", "Honduras", ()),
    (344, "HK", "HKG", "Hong Kong", ()),
    (348, "HU", "HUN", "Hungary", ()),
    (352, "IS", "ISL", "Iceland", ()),
    (356, "IN", "IND", "India", ()),
    (360, "ID", "IDN", "Indonesia", ()),
    (368, "IQ", "IRQ", "Iraq", ()),
    (372, "IE", "IRL", "Ireland", ()),
    (364, "IR", "IRN", "Islamic Republic Of Iran", ("Iran",)),
    (833, "IM", "IMN", "Isle Of Man", ()),
    (376, "IL", "ISR", "Israel", ()),
    (380, "IT", "ITA", "Italy", ()),
    (388, "JM", "JAM", "Jamaica", ()),
    (392, "JP", "JPN", "Japan", ()),
    (832, "JE", "JEY", "Jersey", ()),
    (400, "JO", "JOR", "Jordan", ()),
    (398, "KZ", "KAZ", "Kazakhstan", ()),
    (404, "KE", "KEN", "Kenya", ()),
    (296, "KI", "KIR", "Kiribati", ()),
    (383, "XK", "XKX", "Kosovo", ()),
    (414, "KW", "KWT", "Kuwait", ()),
    (417, "KG", "KGZ", "Kyrgyzstan", ()),
    (428, "LV", "LVA", "Latvia", ()),
    (422, "LB", "LBN", "Lebanon", ()),
    (426, "LS", "LSO", "Lesotho", ()),
    (430, "LR", "LBR", "Liberia", ()),
    (434, "LY", "LBY", "Libya", ()),
    (438, "LI", "LIE", "Liechtenstein", ()),
    (440, "LT", "LTU", "Lithuania", ()),
    (442, "LU", "LUX", "Luxembourg", ()),
    (446, "MO", "MAC", "Macao", ("Macau",)),
    (450, "MG", "MDG", "Madagascar", ()),
    (454, "MW", "MWI", "Malawi", ()),
    (458, "MY", "MYS", "Malaysia", ()),
    (462, "MV", "MDV", "Maldives", ()),
    (466, "ML", "MLI", "Mali", ()),
    (470, "MT", "MLT", "Malta", ()),
    (474, "MQ", "MTQ", "Martinique", ()),
    (478, "MR", "MRT", "Mauritania", ()),
    (480, "MU", "MUS", "Mauritius", ()),
    (175, "YT", "MYT", "Mayotte", ()),
    (484, "MX", "MEX", "Mexico", ()),
    (492, "MC", "MCO", "Monaco", ()),
    (496, "MN", "MNG", "Mongolia", ()),
    (499, "ME", "MNE", "Montenegro", ()),
    (500, "MS", "MSR", "Montserrat", ()),
    (504, "MA", "MAR", "Morocco", ()),
    (508, "MZ", "MOZ", "Mozambique", ()),
    (104, "MM", "MMR", "Myanmar", ("Burma",)),
    (516, "NA", "NAM", "Namibia", ()),
    (520, "NR", "NRU", "Nauru", ()),
    (524, "NP", "NPL", "Nepal", ()),
    (540, "NC", "NCL", "New Caledonia", ()),
    (554, "NZ", "NZL", "New Zealand", ()),
    (558, "NI", "NIC", "Nicaragua", ()),
    (566, "NG", "NGA", "Nigeria", ()),
    (570, "NU", "NIU", "Niue", ()),
    (574, "NF", "NFK", "Norfolk Island", ()),
    (578, "NO", "NOR", "Norway", ()),
    (512, "OM", "OMN", "Oman", ()),
    (586, "PK", "PAK", "Pakistan", ()),
    (585, "PW", "PLW", "Palau", ()),
    (591, "PA", "PAN", "Panama", ()),
    (598, "PG", "PNG", "Papua New Guinea", ()),
    (600, "PY", "PRY", "Paraguay", ()),
    (604, "PE", "PER", "Peru", ()),
    (612, "PN", "PCN", "Pitcairn", ()),
    (616, "PL", "POL", "Poland", ()),
    (620, "PT", "PRT", "Portugal", ()),
    (630, "PR", "PRI", "Puerto Rico", ()),
    (634, "QA", "QAT", "Qatar", ()),
    (807, "MK", "MKD", "Republic Of North Macedonia", ("Macedonia", "North Macedonia")),
    (638, "RE", "REU", "Reunion", ()),
    (642, "RO", "ROU", "Romania", ()),
    (646, "RW", "RWA", "Rwanda", ()),
    (652, "BL", "BLM", "Saint Barthelemy", ("St Barthelemy",)),
    (659, "KN", "KNA", "Saint Kitts And Nevis", ("St Kitts",)),
    (662, "LC", "LCA", "Saint Lucia", ("St Lucia",)),
    (666, "PM", "SPM", "Saint Pierre And Miquelon", ("St Pierre", "Saint Pierre")),
    (670, "VC", "VCT", "Saint Vincent And The Grenadines", ("St Vincent", "Saint Vincent")),
    (882, "WS", "WSM", "Samoa", ()),
    (674, "SM", "SMR", "San Marino", ()),
    (678, "ST", "STP", "Sao Tome And Principe", ("Sao Tome",)),
    (682, "SA", "SAU", "Saudi Arabia", ()),
    (686, "SN", "SEN", "Senegal", ()),
    (688, "RS", "SRB", "Serbia", ()),
    (690, "SC", "SYC", "Seychelles", ()),
    (694, "SL", "SLE", "Sierra Leone", ()),
    (702, "SG", "SGP", "Singapore", ()),
    (703, "SK", "SVK", "Slovakia", ()),
    (705, "SI", "SVN", "Slovenia", ()),
    (90, "SB", "SLB", "Solomon Islands", ()),
    (706, "SO", "SOM", "Somalia", ()),
    (710, "ZA", "ZAF", "South Africa", ()),
    (239, "GS", "SGS", "South Georgia And The South Sandwich Islands", ("South Georgia", "South Sandwich Islands")),
    (728, "SS", "SSD", "South Sudan", ()),
    (724, "ES", "ESP", "Spain", ()),
    (144, "LK", "LKA", "Sri Lanka", ()),
    (275, "PS", "PSE", "State Of Palestine", ("Palestine",)),
    (740, "SR", "SUR", "Suriname", ()),
    (744, "SJ", "SJM", "Svalbard And Jan Mayen", ()),
    (752, "SE", "SWE", "Sweden", ()),
    (756, "CH", "CHE", "Switzerland", ()),
    (760, "SY", "SYR", "Syrian Arab Republic", ("Syria",)),
    (158, "TW", "TWN", "Taiwan, Republic Of China", ("Taiwan", "台灣", "Republic of China", "中華民國")),
    (762, "TJ", "TJK", "Tajikistan", ()),
    (764, "TH", "THA", "Thailand", ()),
    (44, "BS", "BHS", "The Bahamas", ("Bahamas",)),
    (136, "KY", "CYM", "The Cayman Islands", ("Cayman Islands",)),
    (140, "CF", "CAF", "The Central African Republic", ("Central African Republic",)),
    (166, "CC", "CCK", "The Cocos Keeling Islands", ("Cocos Islands", "Keeling Islands")),
    (174, "KM", "COM", "The Comoros", ("Comoros",)),
    (178, "CG", "COG", "The Congo", ("Congo",)),
    (184, "CK", "COK", "The Cook Islands", ("Cook Islands",)),
    (408, "KP", "PRK", "The Democratic Peoples Republic Of Korea", ("North Korea", "Democratic Peoples Republic Of Korea")),
    (180, "CD", "COD", "The Democratic Republic Of The Congo", ("Democratic Republic Of The Congo",)),
    (214, "DO", "DOM", "The Dominican Republic", ("Dominican Republic",)),
    (238, "FK", "FLK", "The Falkland Islands Malvinas", ("Malvinas", "Falkland Islands")),
    (234, "FO", "FRO", "The Faroe Islands", ("Faroe Islands",)),
    (260, "TF", "ATF", "The French Southern Territories", ("French Southern Territories",)),
    (270, "GM", "GMB", "The Gambia", ("Gambia",)),
    (336, "VA", "VAT", "The Holy See", ("Holy See", "Vatican", "Vatican City")),
    (418, "LA", "LAO", "The Lao Peoples Democratic Republic", ("Lao Peoples Democratic Republic", "Laos")),
    (584, "MH", "MHL", "The Marshall Islands", ("Marshall Islands",)),
    (528, "NL", "NLD", "The Netherlands", ("Netherlands", "Holland")),
    (562, "NE", "NER", "The Niger", ("Niger",)),
    (580, "MP", "MNP", "The Northern Mariana Islands", ("Northern Mariana Islands",)),
    (608, "PH", "PHL", "The Philippines", ("Philippines",)),
    (410, "KR", "KOR", "The Republic Of Korea", ("South Korea", "Republic Of Korea")),
    (498, "MD", "MDA", "The Republic Of Moldova", ("Moldova", "Republic Of Moldova")),
    (643, "RU", "RUS", "The Russian Federation", ("Russia", "Russian Federation")),
    (729, "SD", "SDN", "The Sudan", ("Sudan",)),
    (796, "TC", "TCA", "The Turks And Caicos Islands", ("Turks And Caicos Islands",)),
    (784, "AE", "ARE", "The United Arab Emirates", ("United Arab Emirates",)),
    (826, "GB", "GBR", "The United Kingdom Of Great Britain And Northern Ireland", ("England", "Scotland", "Great Britain", "United Kingdom", "Northern Ireland", "United Kingdom Of Great Britain", "United Kingdom Of Great Britain And Northern Ireland")),
    (581, "UM", "UMI", "The United States Minor Outlying Islands", ("United States Minor Outlying Islands",)),
    (840, "US", "USA", "The United States Of America", ("America", "United States", "United States Of America")),
    (626, "TL", "TLS", "Timor Leste", ("East Timor",)),
    (768, "TG", "TGO", "Togo", ()),
    (772, "TK", "TKL", "Tokelau", ()),
    (776, "TO", "TON", "Tonga", ()),
    (780, "TT", "TTO", "Trinidad And Tobago", ("Trinidad", "Tobago")),
    (788, "TN", "TUN", "Tunisia", ()),
    (792, "TR", "TUR", "Türkiye", ("Turkey", "Turkiye")),
    (795, "TM", "TKM", "Turkmenistan", ()),
    (798, "TV", "TUV", "Tuvalu", ()),
    (850, "VI", "VIR", "US Virgin Islands", ()),
    (800, "UG", "UGA", "Uganda", ()),
    (804, "UA", "UKR", "Ukraine", ()),
    (834, "TZ", "TZA", "United Republic Of Tanzania", ("Tanzania",)),
    (858, "UY", "URY", "Uruguay", ()),
    (860, "UZ", "UZB", "Uzbekistan", ()),
    (548, "VU", "VUT", "Vanuatu", ()),
    (704, "VN", "VNM", "Vietnam", ()),
    (876, "WF", "WLF", "Wallis And Futuna", ()),
    (732, "EH", "ESH", "Western Sahara", ()),
    (887, "YE", "YEM", "Yemen", ()),
    (894, "ZM", "ZMB", "Zambia", ()),
    (716, "ZW", "ZWE", "Zimbabwe", ()),
)
