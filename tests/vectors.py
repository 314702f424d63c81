PAIRS = [
    (b"AB", b"BB8"),
    (b"Hello!", b"%69 VD92E"),
    (b"Hello!!", b"%69 VD92EX0"),
    (b"base-45", b"UJCLQE7W581"),
    (b"base-45-", b"UJCLQE7W5NW6"),
]

BIG_DECODED = b"Lorem ipsum dolor sit amet, consectetuer adipiscing elit. Fusce aliquam vestibulum ipsum. Fusce tellus. Duis ante orci, molestie vitae vehicula venenatis, tincidunt ac pede. In laoreet, magna id viverra tincidunt, sem odio bibendum justo, vel imperdiet sapien wisi sed libero. Integer rutrum, orci vestibulum ullamcorper ultricies, lacus quam ultricies odio, vitae placerat pede sem sit amet enim. Et harum quidem rerum facilis est et expedita distinctio. Integer malesuada. Excepteur sint occaecat cupidatat non proident, sunt in culpa qui officia deserunt mollit anim id est laborum. Etiam bibendum elit eget erat. Nulla pulvinar eleifend sem. Pellentesque arcu. Itaque earum rerum hic tenetur a sapiente delectus, ut aut reiciendis voluptatibus maiores alias consequatur aut perferendis doloribus asperiores repellat. Integer tempor. Duis condimentum augue id magna semper rutrum. Fusce consectetuer risus a nunc. In sem justo, commodo ut, suscipit at, pharetra vitae, orci. Pellentesque sapien. Maecenas libero."

BIG_ENCODED = b"$T9ZKE ZD$ED$QE ZDGVC*VDBJEPQESUEBEC7$C1Q5UPCF/DZ C7WENWE5$C944AVCM9EJQEZEDU1D: C-EDI$5$+8JQEDZCAEC%EDY$E ZDO/E QENED0%E1%EH44W9E1%EI$5$+8JQEDZC7WE VD7%EI$5KT8+ED944G/DDZC04EOPC1Q5P$DTVD QEQEDU44-ED3ECU44+ COED0%EOCCO/E1/D..DBWE9PES44ZEDOPCMVCG/D944-NCI9E6VCI$5XC9K44DECZKE7$C1Q5B$DI3DOCCPEDU44/ED5$CVKES44ZEDOPCMVCG/D1Q5LQE ZDV3E EDA44NED1$CMVC ZDSKD QEK2EU44: CH44Q$D5$CAVC7$CR44EECQEDM-DE4FPQER44  CK44NED5$CM2EU34G/D* C5$CQ448%E6LE3 DN44XKE2DDO/E QENED0%E1%ET44 VDBECUPC1LE5$CT44:VD*KEOPC6$C1Q5PVD PC.OEKFEBECT44:VD*KEOPC6$CN44AVCK2EU44-ED3ECO44PVDKPCVKESUEI9E6VCR440$CR44-ED944F$DSUE1$CYEDI$55Z8G44GEC1%EP44.$E6VC ZDZKE6LE ZDJ.COPCXVD.OE6$CSUE7$CD447AF  C-EDOCCAVC QEZEDZPC EDI$5XC97WE93DBJEB$DTVD$QE2EC%CCQ34*9F3$C7WE6%ER44ZEDSUEU3EGPCZ CIECB444%EPEDIECIECM44-3EO440LEPED1$C+UER442%ESUEZEDB440%EE9EP44.$EN44O.COEDMEDC446$C5$C2%ESUEP$D VD-ED9445/D ZDPEDD44 QEK440EC04E1%EI$55Z8MED ZD%JCYJC0/D1%ED44XVDSUE* C7$CD44VKE.UEZ340%EPVDO440%ES/E..DBJE: C- CN.C0/DR440$CI$5G7A VD1$C7WEXQE%$E944XKES EU343WEKFEDZCX C6LE ZDZKE6LE ZD:8D-NC7WE1/DNWEBJEOCCHQEM9E1$C7WEC44: CZ CNWE9PET44SUEJECSUEZKEOEDQED0/D+EDU44*3E4%E3WEBWE5KC.OEB$D EDZKE.OEAECMED.OEUPCF/D4$CY$ENWEBJEJECSUEI9E KE5$C1$CAVC.OEGVC*VD*KE5KC.OEHECI9E*KE04E6$CQ443$C: CPVD.UEU34G/D* C5$CS440$CS9EPJEP34.$E.OEUPC0/DYED1$CNWE ZDJECP3DDZCPEDL445EC..DR440$CI9EBJE6LEKWE1%EI$5$+8JQEDZCUPCF/DZ C7WENWE5$CQ44+ED7%E944M442%EAOCU34M-DLQE ZDSKD QEK2EB44+3EP$DGVCT44+UER447%EOPCM9ESUEIEC1Q5L9EGEC7$CVKEU44-ED3EC1Q504EOPCI$5G7A VD1$C7WEXQE%$ER44EECQED -DY343ECKPC..D.OEXVDYJC0LE11"

